# regression_viz/utils/data_loading.py
"""
Input helpers for training/test datasets.
Accepts lists of mappings or pandas DataFrames and projects single axes.
"""

import math
from numbers import Real
from typing import Any, List, Mapping, Sequence

import pandas as pd

from regression_viz.errors import PlotInputError


def to_observations(data: Any) -> List[Mapping[str, Any]]:
    """
    Normalize a dataset into an ordered list of observations.
    DataFrames are read row by row in index order.
    """
    if data is None:
        return []
    if isinstance(data, pd.DataFrame):
        return data.to_dict("records")
    if isinstance(data, Mapping):
        raise PlotInputError("Dataset must be a sequence of observations, not a single mapping")
    return list(data)


def project_axis(observations: Sequence[Mapping[str, Any]], axis: str) -> List[float]:
    """Extract one axis from every observation as floats."""
    values = []
    for i, point in enumerate(observations):
        try:
            raw = point[axis]
        except KeyError:
            raise PlotInputError(f"Observation {i} has no value for axis '{axis}'", axis=axis) from None
        except TypeError:
            raise PlotInputError(f"Observation {i} is not a mapping", axis=axis) from None

        if isinstance(raw, bool) or not isinstance(raw, Real):
            raise PlotInputError(
                f"Observation {i} has a non-numeric value for axis '{axis}': {raw!r}", axis=axis
            )
        value = float(raw)
        if not math.isfinite(value):
            raise PlotInputError(f"Observation {i} has a non-finite value ({raw!r}) for axis '{axis}'", axis=axis)
        values.append(value)
    return values
