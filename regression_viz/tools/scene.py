# regression_viz/tools/scene.py
"""
Scene assembly: packages the training, test and prediction series plus axis
titles into a Scene. Purely structural; nothing is reordered or resampled.

Training and test data arrive already projected onto the requested axes,
as a mapping from axis name to the column of values.
"""

from typing import List, Mapping, Optional, Sequence, Tuple

from regression_viz.constants import (
    ROLE_TRAINING,
    ROLE_TEST,
    ROLE_PREDICTION,
    SERIES_NAMES,
    SERIES_COLORS,
    MODE_MARKERS,
    MODE_LINES,
    TITLE_2D,
    TITLE_3D,
)
from regression_viz.models import AxisTitles, PlaneAxes, Scene, Series, SpaceAxes
from regression_viz.tools.sampling import split_grid

Columns = Mapping[str, Sequence[float]]


def _series(role: str, x: Sequence[float], y: Sequence[float],
            z: Optional[Sequence[float]] = None) -> Series:
    return Series(
        name=SERIES_NAMES[role],
        role=role,
        mode=MODE_LINES if role == ROLE_PREDICTION else MODE_MARKERS,
        color=SERIES_COLORS[role],
        x=list(x),
        y=list(y),
        z=list(z) if z is not None else None,
    )


def assemble_scene_2d(training: Columns, test: Columns, axes: PlaneAxes,
                      xs: Sequence[float], ys: Sequence[float]) -> Scene:
    """Build a 2D scene: markers for the data, a line through the sampled curve."""
    if len(xs) != len(ys):
        raise ValueError(f"Curve has {len(xs)} x values but {len(ys)} predictions")

    series: List[Series] = [
        _series(ROLE_TRAINING, training[axes.x], training[axes.y]),
        _series(ROLE_TEST, test[axes.x], test[axes.y]),
        _series(ROLE_PREDICTION, xs, ys),
    ]

    return Scene(
        title=TITLE_2D,
        dimensions=2,
        series=series,
        axis_titles=AxisTitles(x=axes.x, y=axes.y),
    )


def assemble_scene_3d(training: Columns, test: Columns, axes: SpaceAxes,
                      grid: Sequence[Tuple[float, float]], zs: Sequence[float]) -> Scene:
    """
    Build a 3D scene. The prediction series is the flattened grid in
    row-major order, joined by a single polyline.
    """
    if len(grid) != len(zs):
        raise ValueError(f"Grid has {len(grid)} points but {len(zs)} predictions")

    flat_x, flat_y = split_grid(list(grid))

    series: List[Series] = [
        _series(ROLE_TRAINING, training[axes.x], training[axes.y], training[axes.z]),
        _series(ROLE_TEST, test[axes.x], test[axes.y], test[axes.z]),
        _series(ROLE_PREDICTION, flat_x, flat_y, zs),
    ]

    return Scene(
        title=TITLE_3D,
        dimensions=3,
        series=series,
        axis_titles=AxisTitles(x=axes.x, y=axes.y, z=axes.z),
    )
