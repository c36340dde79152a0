# regression_viz/tools/evaluation.py
"""
Model evaluation over a sample grid.

The prediction function is called once per sample with a mapping from axis
name to sampled value: {x: value} for curves, {x: value, y: value} for
surfaces. Results keep the grid order. The first failure aborts the whole
evaluation, since a partially evaluated grid would plot something misleading.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from regression_viz.errors import EvaluationError
from regression_viz.models import PlaneAxes, PredictionFunction, SpaceAxes

logger = logging.getLogger(__name__)


def _as_prediction(result: Any, index: int, point: Dict[str, float]) -> float:
    # Single-element arrays are what most estimators hand back for one row
    if isinstance(result, np.ndarray) and result.size == 1:
        result = result.reshape(-1)[0]

    if isinstance(result, (bool, np.bool_)) or not isinstance(result, Real):
        raise EvaluationError(
            f"Prediction at sample {index} {point} is not numeric: {result!r}",
            index=index,
            point=point,
        )

    value = float(result)
    if not math.isfinite(value):
        raise EvaluationError(
            f"Prediction at sample {index} {point} is not finite: {value}",
            index=index,
            point=point,
        )
    return value


def _evaluate(points: Sequence[Dict[str, float]], prediction_function: PredictionFunction) -> List[float]:
    predictions = []
    for index, point in enumerate(points):
        try:
            result = prediction_function(dict(point))
        except Exception as e:
            raise EvaluationError(
                f"Prediction function failed at sample {index} {point}: {e}",
                index=index,
                point=point,
            ) from e
        predictions.append(_as_prediction(result, index, point))

    logger.debug("Evaluated prediction function at %d samples", len(predictions))
    return predictions


def evaluate_curve(xs: Sequence[float], axes: PlaneAxes,
                   prediction_function: PredictionFunction) -> List[float]:
    """Predict the dependent value at each sampled x."""
    points = [{axes.x: float(x)} for x in xs]
    return _evaluate(points, prediction_function)


def evaluate_surface(grid: Sequence[Tuple[float, float]], axes: SpaceAxes,
                     prediction_function: PredictionFunction) -> List[float]:
    """Predict the dependent value at each (x, y) grid pair, in grid order."""
    points = [{axes.x: float(x), axes.y: float(y)} for x, y in grid]
    return _evaluate(points, prediction_function)
