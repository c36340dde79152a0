"""
Shared fixtures for regression_viz tests.
"""

from pathlib import Path

import pytest

from regression_viz.config import PlotSettings


class RecordingRenderer:
    """Renderer stand-in that records scenes instead of drawing them."""

    def __init__(self):
        self.calls = []

    def render(self, scene, output_path):
        self.calls.append((scene, Path(output_path)))
        return Path(output_path)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def settings():
    return PlotSettings()


@pytest.fixture
def training_2d():
    return [
        {'x': 1, 'y': 2.1},
        {'x': 2, 'y': 4.9},
        {'x': 3, 'y': 6.8},
        {'x': 4, 'y': 8.2},
    ]


@pytest.fixture
def holdout_2d():
    return [
        {'x': 5, 'y': 10.1},
        {'x': 6, 'y': 12.3},
    ]


@pytest.fixture
def training_3d():
    return [
        {'x': 1, 'y': 2, 'z': 3.1},
        {'x': 2, 'y': 4, 'z': 6.2},
        {'x': 3, 'y': 6, 'z': 9.3},
        {'x': 4, 'y': 8, 'z': 12.4},
    ]


@pytest.fixture
def holdout_3d():
    return [
        {'x': 5, 'y': 10, 'z': 15.5},
        {'x': 6, 'y': 12, 'z': 18.6},
    ]
