# regression_viz/config.py
"""
Runtime settings for regression_viz.

Sample counts and export size are a smoothness vs. cost trade-off, so they
are settings with documented defaults rather than hard-coded values.
Overrides can come from keyword arguments or REGRESSION_VIZ_* environment
variables. Without an explicit path, the nearest .env file found upward
from the current working directory is read.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from regression_viz.constants import (
    DEFAULT_CURVE_POINTS,
    DEFAULT_SURFACE_POINTS_X,
    DEFAULT_SURFACE_POINTS_Y,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_TEMPLATE,
    DEFAULT_LOG_LEVEL,
    MIN_SAMPLE_POINTS,
    ENV_CURVE_POINTS,
    ENV_SURFACE_POINTS_X,
    ENV_SURFACE_POINTS_Y,
    ENV_IMAGE_WIDTH,
    ENV_IMAGE_HEIGHT,
    ENV_TEMPLATE,
    ENV_LOG_LEVEL,
)


class PlotSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    curve_points: int = Field(default=DEFAULT_CURVE_POINTS, ge=MIN_SAMPLE_POINTS, description="Points sampled along a 2D regression curve")
    surface_points_x: int = Field(default=DEFAULT_SURFACE_POINTS_X, ge=MIN_SAMPLE_POINTS, description="Grid points along the first independent axis in 3D")
    surface_points_y: int = Field(default=DEFAULT_SURFACE_POINTS_Y, ge=MIN_SAMPLE_POINTS, description="Grid points along the second independent axis in 3D")
    image_width: int = Field(default=DEFAULT_IMAGE_WIDTH, gt=0, description="Exported image width in pixels")
    image_height: int = Field(default=DEFAULT_IMAGE_HEIGHT, gt=0, description="Exported image height in pixels")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Plotly template applied to the figure")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Level for the package logger")


_ENV_FIELDS = {
    'curve_points': ENV_CURVE_POINTS,
    'surface_points_x': ENV_SURFACE_POINTS_X,
    'surface_points_y': ENV_SURFACE_POINTS_Y,
    'image_width': ENV_IMAGE_WIDTH,
    'image_height': ENV_IMAGE_HEIGHT,
    'template': ENV_TEMPLATE,
    'log_level': ENV_LOG_LEVEL,
}


def load_settings(dotenv_path: Optional[str] = None, **overrides) -> PlotSettings:
    """
    Build PlotSettings from the environment.

    Precedence: explicit keyword overrides, then REGRESSION_VIZ_* variables,
    then the defaults in constants.py.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

    values = {}
    for field_name, env_name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()

    values.update({k: v for k, v in overrides.items() if v is not None})
    return PlotSettings(**values)
