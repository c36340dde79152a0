# regression_viz/tools/adapters.py
"""
Adapters that turn fitted models into prediction functions.
"""

from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from regression_viz.models import PredictionFunction


def estimator_prediction_function(estimator: Any, feature_names: Sequence[str]) -> PredictionFunction:
    """
    Wrap a fitted scikit-learn style estimator as a prediction function.

    Each call builds a one-row DataFrame in feature_names order, so an
    estimator fit on a DataFrame sees the same column names it was trained on.
    """
    if not hasattr(estimator, "predict"):
        raise TypeError(f"{type(estimator).__name__} has no predict method")

    columns = list(feature_names)
    if not columns:
        raise ValueError("feature_names must name at least one feature")

    def predict(point: Mapping[str, float]) -> float:
        row = pd.DataFrame([[point[name] for name in columns]], columns=columns)
        return float(np.asarray(estimator.predict(row)).ravel()[0])

    return predict
