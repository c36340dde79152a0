# regression_viz/utils/rendering.py
"""
Renderer for regression scenes using Plotly.

Static formats (PNG, JPEG, WebP, SVG, PDF) are exported through Kaleido;
HTML pages load plotly.js from the CDN. Every write goes to a staging file
next to the destination and is moved into place only once the backend has
finished, so a failed render never leaves a partial image behind.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

import plotly.graph_objects as go
import plotly.io as pio

from regression_viz.constants import (
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_TEMPLATE,
    STATIC_IMAGE_FORMATS,
    HTML_SUFFIXES,
)
from regression_viz.errors import RenderError
from regression_viz.models import Scene, Series

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Renderer(Protocol):
    """Turns a Scene into an image file."""

    def render(self, scene: Scene, output_path: PathLike) -> Path:
        ...


# ============================================
# Figure Construction
# ============================================

def _trace_style(series: Series) -> dict:
    if series.mode == 'lines':
        return {'line': dict(color=series.color)}
    return {'marker': dict(color=series.color)}


def scene_to_figure(scene: Scene, template: str = DEFAULT_TEMPLATE) -> go.Figure:
    """Build a Plotly figure with one trace per series."""
    fig = go.Figure()

    for series in scene.series:
        if scene.dimensions == 3:
            fig.add_trace(go.Scatter3d(
                x=series.x,
                y=series.y,
                z=series.z,
                mode=series.mode,
                name=series.name,
                **_trace_style(series)
            ))
        else:
            fig.add_trace(go.Scatter(
                x=series.x,
                y=series.y,
                mode=series.mode,
                name=series.name,
                **_trace_style(series)
            ))

    titles = scene.axis_titles
    if scene.dimensions == 3:
        fig.update_layout(
            title=scene.title,
            template=template,
            scene=dict(
                xaxis=dict(title=titles.x),
                yaxis=dict(title=titles.y),
                zaxis=dict(title=titles.z),
            )
        )
    else:
        fig.update_layout(
            title=scene.title,
            template=template,
            xaxis_title=titles.x,
            yaxis_title=titles.y,
            hovermode='closest'
        )

    return fig


# ============================================
# Plotly Renderer
# ============================================

@contextmanager
def _staging_file(output_path: Path) -> Iterator[Path]:
    """
    Yield a temporary path in the destination directory. On clean exit it
    replaces output_path; on every exit the temporary file is removed.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.stem}-", suffix=output_path.suffix, dir=str(output_path.parent)
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        os.replace(tmp_path, output_path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


class PlotlyRenderer:
    """Renders scenes to image files with Plotly + Kaleido."""

    def __init__(self, width: int = DEFAULT_IMAGE_WIDTH, height: int = DEFAULT_IMAGE_HEIGHT,
                 template: str = DEFAULT_TEMPLATE):
        self.width = width
        self.height = height
        self.template = template

    @classmethod
    def from_settings(cls, settings) -> "PlotlyRenderer":
        return cls(width=settings.image_width, height=settings.image_height, template=settings.template)

    def resolve_format(self, output_path: Path) -> Optional[str]:
        """Image format for a path suffix; None means HTML."""
        suffix = output_path.suffix.lower()
        if suffix in HTML_SUFFIXES:
            return None
        if suffix in STATIC_IMAGE_FORMATS:
            return STATIC_IMAGE_FORMATS[suffix]
        supported = sorted(set(STATIC_IMAGE_FORMATS) | HTML_SUFFIXES)
        raise RenderError(
            f"Unsupported output format '{suffix or output_path.name}'. Supported: {supported}",
            output_path=output_path,
        )

    def render(self, scene: Scene, output_path: PathLike) -> Path:
        output_path = Path(output_path)
        image_format = self.resolve_format(output_path)

        if not output_path.parent.is_dir():
            raise RenderError(f"Output directory does not exist: {output_path.parent}", output_path=output_path)

        fig = scene_to_figure(scene, template=self.template)
        try:
            with _staging_file(output_path) as staging_path:
                if image_format is None:
                    pio.write_html(fig, str(staging_path), include_plotlyjs='cdn', full_html=True)
                else:
                    pio.write_image(
                        fig, str(staging_path), format=image_format, width=self.width, height=self.height
                    )
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to render plot to {output_path}: {e}", output_path=output_path) from e

        logger.debug("Rendered %dD scene to %s", scene.dimensions, output_path)
        return output_path
