# regression_viz/tools/sampling.py
"""
Deterministic evaluation grids for the prediction function.

Curves are sampled at evenly spaced points including both endpoints;
surfaces are the cross product of two such samples, first axis outer.
"""

from typing import List, Tuple

import numpy as np

from regression_viz.constants import (
    DEFAULT_CURVE_POINTS,
    DEFAULT_SURFACE_POINTS_X,
    DEFAULT_SURFACE_POINTS_Y,
    MIN_SAMPLE_POINTS,
)
from regression_viz.models import Domain


def sample_linear(domain: Domain, count: int = DEFAULT_CURVE_POINTS) -> List[float]:
    """
    Evenly spaced values across [domain.min, domain.max].

    The i-th value is min + i * (max - min) / (count - 1). The first value is
    exactly domain.min and the last exactly domain.max.
    """
    if count < MIN_SAMPLE_POINTS:
        raise ValueError(f"count must be at least {MIN_SAMPLE_POINTS}, got {count}")

    step = (domain.max - domain.min) / (count - 1)
    values = domain.min + np.arange(count, dtype=float) * step
    # Rounding in the product can overshoot; pin both ends and keep the order monotone.
    values[0] = domain.min
    values[-1] = domain.max
    values = np.clip(values, domain.min, domain.max)
    return values.tolist()


def sample_grid(domain_x: Domain, domain_y: Domain,
                count_x: int = DEFAULT_SURFACE_POINTS_X,
                count_y: int = DEFAULT_SURFACE_POINTS_Y) -> List[Tuple[float, float]]:
    """
    Row-major (x outer, y inner) grid of count_x * count_y coordinate pairs.
    """
    xs = sample_linear(domain_x, count_x)
    ys = sample_linear(domain_y, count_y)
    return [(x, y) for x in xs for y in ys]


def split_grid(grid: List[Tuple[float, float]]) -> Tuple[List[float], List[float]]:
    """Flatten a coordinate grid into parallel x and y sequences, keeping order."""
    if not grid:
        return [], []
    xs, ys = zip(*grid)
    return list(xs), list(ys)
