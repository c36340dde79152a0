"""
regression_viz - plots a regression model's predictions against its
training and test data, in two or three dimensions.

Usage:
    from regression_viz import create_plot

    create_plot(training, test, {'x': 'x', 'y': 'y'}, 'plot.png',
                lambda point: 2 * point['x'] + 0.1)
"""

import logging

from regression_viz.config import PlotSettings, load_settings
from regression_viz.errors import EvaluationError, PlotError, PlotInputError, RenderError
from regression_viz.models import (
    AxisTitles,
    Domain,
    PlaneAxes,
    Scene,
    Series,
    SpaceAxes,
    parse_axes,
)
from regression_viz.plot import (
    build_scene,
    create_plot,
    create_plot_2d,
    create_plot_3d,
    create_plot_async,
)
from regression_viz.tools.adapters import estimator_prediction_function
from regression_viz.utils.rendering import PlotlyRenderer, Renderer, scene_to_figure

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'create_plot',
    'create_plot_2d',
    'create_plot_3d',
    'create_plot_async',
    'build_scene',
    'PlotSettings',
    'load_settings',
    'PlaneAxes',
    'SpaceAxes',
    'parse_axes',
    'Domain',
    'Series',
    'AxisTitles',
    'Scene',
    'PlotError',
    'PlotInputError',
    'EvaluationError',
    'RenderError',
    'PlotlyRenderer',
    'Renderer',
    'scene_to_figure',
    'estimator_prediction_function',
]
