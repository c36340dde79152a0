# regression_viz/tools/domain.py
"""
Domain estimation: the closed interval an axis spans across training and test data.
"""

from typing import Optional, Sequence

import numpy as np

from regression_viz.errors import PlotInputError
from regression_viz.models import Domain


def estimate_domain(training_values: Sequence[float], test_values: Sequence[float],
                    axis: Optional[str] = None) -> Domain:
    """
    Return [min, max] over the union of training and test values.

    Raises PlotInputError when both sequences are empty; no default domain
    is inferred.
    """
    combined = np.concatenate([
        np.asarray(training_values, dtype=float).ravel(),
        np.asarray(test_values, dtype=float).ravel(),
    ])

    if combined.size == 0:
        label = f"axis '{axis}'" if axis else "axis"
        raise PlotInputError(f"No training or test values for {label}; domain is undefined", axis=axis)

    lo = float(np.min(combined))
    hi = float(np.max(combined))
    if not (np.isfinite(lo) and np.isfinite(hi)):
        label = f"axis '{axis}'" if axis else "axis"
        raise PlotInputError(f"Non-finite values for {label}: [{lo}, {hi}]", axis=axis)

    return Domain(min=lo, max=hi)
