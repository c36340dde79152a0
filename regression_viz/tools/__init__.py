"""
Pipeline stages for regression plots: domain estimation, grid sampling,
model evaluation and scene assembly.
"""

from .domain import estimate_domain
from .sampling import sample_linear, sample_grid
from .evaluation import evaluate_curve, evaluate_surface
from .scene import assemble_scene_2d, assemble_scene_3d

__all__ = [
    'estimate_domain',
    'sample_linear',
    'sample_grid',
    'evaluate_curve',
    'evaluate_surface',
    'assemble_scene_2d',
    'assemble_scene_3d',
]
