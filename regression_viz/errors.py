# regression_viz/errors.py
"""
Exception types raised by the plotting pipeline.

Every failure is fatal to the plot request: input problems are reported
before any sampling starts, evaluation problems name the sample that failed,
and rendering problems name the destination path.
"""

from typing import Any, Mapping, Optional


class PlotError(Exception):
    """Base class for all regression_viz failures."""


class PlotInputError(PlotError, ValueError):
    """Training/test data or axis names cannot support the requested plot."""

    def __init__(self, message: str, axis: Optional[str] = None):
        super().__init__(message)
        self.axis = axis


class EvaluationError(PlotError):
    """The prediction function failed or returned a non-numeric value."""

    def __init__(self, message: str, index: int, point: Mapping[str, float]):
        super().__init__(message)
        self.index = index
        self.point = dict(point)


class RenderError(PlotError):
    """The renderer could not produce the image file."""

    def __init__(self, message: str, output_path: Any = None):
        super().__init__(message)
        self.output_path = output_path
