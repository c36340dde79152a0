# regression_viz/plot.py
"""
Regression plot entry points.

create_plot() is the single entry point: it parses the axes into the tagged
AxisSpec variant and routes to the 2D or 3D pipeline. Each pipeline runs

    projection -> domain estimation -> sampling -> evaluation -> scene assembly

synchronously, then hands the finished scene to the renderer. The renderer
is only created once the scene exists, so an input or evaluation failure
never touches the output path.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from regression_viz.config import PlotSettings, load_settings
from regression_viz.errors import PlotError
from regression_viz.models import PlaneAxes, PredictionFunction, Scene, SpaceAxes, parse_axes
from regression_viz.tools.domain import estimate_domain
from regression_viz.tools.evaluation import evaluate_curve, evaluate_surface
from regression_viz.tools.sampling import sample_grid, sample_linear
from regression_viz.tools.scene import assemble_scene_2d, assemble_scene_3d
from regression_viz.utils.data_loading import project_axis, to_observations
from regression_viz.utils.rendering import PathLike, PlotlyRenderer, Renderer

logger = logging.getLogger(__name__)


def _project(data: Any, names: Sequence[str]) -> Dict[str, List[float]]:
    observations = to_observations(data)
    return {name: project_axis(observations, name) for name in names}


def _project_both(training_data: Any, test_data: Any,
                  names: Sequence[str]) -> Tuple[Dict[str, List[float]], Dict[str, List[float]]]:
    return _project(training_data, names), _project(test_data, names)


# ============================================
# Scene Pipelines
# ============================================

def build_scene_2d(training_data: Any, test_data: Any, axes: PlaneAxes,
                   prediction_function: PredictionFunction,
                   settings: Optional[PlotSettings] = None) -> Scene:
    settings = settings or load_settings()
    training, test = _project_both(training_data, test_data, [axes.x, axes.y])

    domain = estimate_domain(training[axes.x], test[axes.x], axis=axes.x)
    logger.debug("Domain for %s: [%s, %s]", axes.x, domain.min, domain.max)

    xs = sample_linear(domain, settings.curve_points)
    ys = evaluate_curve(xs, axes, prediction_function)
    return assemble_scene_2d(training, test, axes, xs, ys)


def build_scene_3d(training_data: Any, test_data: Any, axes: SpaceAxes,
                   prediction_function: PredictionFunction,
                   settings: Optional[PlotSettings] = None) -> Scene:
    settings = settings or load_settings()
    training, test = _project_both(training_data, test_data, [axes.x, axes.y, axes.z])

    domain_x = estimate_domain(training[axes.x], test[axes.x], axis=axes.x)
    domain_y = estimate_domain(training[axes.y], test[axes.y], axis=axes.y)
    logger.debug(
        "Domains: %s=[%s, %s], %s=[%s, %s]",
        axes.x, domain_x.min, domain_x.max, axes.y, domain_y.min, domain_y.max,
    )

    grid = sample_grid(domain_x, domain_y, settings.surface_points_x, settings.surface_points_y)
    zs = evaluate_surface(grid, axes, prediction_function)
    return assemble_scene_3d(training, test, axes, grid, zs)


def build_scene(training_data: Any, test_data: Any, axes: Any,
                prediction_function: PredictionFunction,
                settings: Optional[PlotSettings] = None) -> Scene:
    """Run the whole pipeline except rendering."""
    spec = parse_axes(axes)
    if isinstance(spec, SpaceAxes):
        return build_scene_3d(training_data, test_data, spec, prediction_function, settings)
    if isinstance(spec, PlaneAxes):
        return build_scene_2d(training_data, test_data, spec, prediction_function, settings)
    raise TypeError(f"Unsupported axis specification: {type(spec).__name__}")


# ============================================
# Plot Entry Points
# ============================================

def _render(scene: Scene, output_path: PathLike, settings: PlotSettings,
            renderer: Optional[Renderer]) -> Path:
    renderer = renderer or PlotlyRenderer.from_settings(settings)
    path = Path(renderer.render(scene, output_path))
    logger.info("%dD Plot saved to %s", scene.dimensions, path)
    return path


def create_plot_2d(training_data: Any, test_data: Any, axes: Union[PlaneAxes, Dict[str, str]],
                   output_path: PathLike, prediction_function: PredictionFunction,
                   *, settings: Optional[PlotSettings] = None,
                   renderer: Optional[Renderer] = None) -> Path:
    """
    Plot training data, test data and the regression curve of a
    one-input prediction function.
    """
    settings = settings or load_settings()
    spec = parse_axes(axes)
    if not isinstance(spec, PlaneAxes):
        raise TypeError("create_plot_2d requires axes without a 'z' axis")

    scene = build_scene_2d(training_data, test_data, spec, prediction_function, settings)
    return _render(scene, output_path, settings, renderer)


def create_plot_3d(training_data: Any, test_data: Any, axes: Union[SpaceAxes, Dict[str, str]],
                   output_path: PathLike, prediction_function: PredictionFunction,
                   *, settings: Optional[PlotSettings] = None,
                   renderer: Optional[Renderer] = None) -> Path:
    """
    Plot training data, test data and the regression surface of a
    two-input prediction function, sampled on a row-major grid.
    """
    settings = settings or load_settings()
    spec = parse_axes(axes)
    if not isinstance(spec, SpaceAxes):
        raise TypeError("create_plot_3d requires axes with a 'z' axis")

    scene = build_scene_3d(training_data, test_data, spec, prediction_function, settings)
    return _render(scene, output_path, settings, renderer)


def create_plot(training_data: Any, test_data: Any, axes: Any, output_path: PathLike,
                prediction_function: PredictionFunction,
                *, settings: Optional[PlotSettings] = None,
                renderer: Optional[Renderer] = None) -> Path:
    """
    Creates a plot of the training and test data along with the model's
    predictions, delegating to create_plot_2d or create_plot_3d.

    Args:
        training_data: Observations the model was trained on (list of mappings or DataFrame)
        test_data: Observations the model was tested on
        axes: PlaneAxes/SpaceAxes, or a mapping with 'x', 'y' and optional 'z'.
              Without 'z' the plot is 2D.
        output_path: Where to write the image; the suffix selects the format
        prediction_function: Called with {x: value} (2D) or {x: value, y: value} (3D)
        settings: Sample counts and export options; read from the environment when omitted
        renderer: Collaborator that writes the image; PlotlyRenderer by default

    Returns:
        Path of the written image.

    Raises:
        PlotInputError: axes or data cannot define the plot
        EvaluationError: the prediction function failed at a sample
        RenderError: the image could not be written
    """
    settings = settings or load_settings()

    try:
        spec = parse_axes(axes)
        if isinstance(spec, SpaceAxes):
            return create_plot_3d(training_data, test_data, spec, output_path, prediction_function,
                                  settings=settings, renderer=renderer)
        return create_plot_2d(training_data, test_data, spec, output_path, prediction_function,
                              settings=settings, renderer=renderer)
    except PlotError as e:
        logger.error("Plot to %s failed: %s", output_path, e)
        raise


async def create_plot_async(training_data: Any, test_data: Any, axes: Any, output_path: PathLike,
                            prediction_function: PredictionFunction,
                            *, settings: Optional[PlotSettings] = None,
                            renderer: Optional[Renderer] = None) -> Path:
    """
    Same as create_plot, but the renderer handoff runs in a worker thread
    and is awaited. Scene construction happens before the first await.
    """
    settings = settings or load_settings()

    try:
        scene = build_scene(training_data, test_data, axes, prediction_function, settings)
        return await asyncio.to_thread(_render, scene, output_path, settings, renderer)
    except PlotError as e:
        logger.error("Plot to %s failed: %s", output_path, e)
        raise
