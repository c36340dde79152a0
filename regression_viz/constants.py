"""
Configuration constants for regression_viz.

Centralized constants for:
- Regression line sampling density
- Series names and palette
- Plot titles
- Image export settings

This module provides a single source of truth for the fixed values
used across the plotting pipeline.
"""

# ============================================
# Sampling Density
# ============================================

# Number of evenly spaced points on a 2D regression curve
DEFAULT_CURVE_POINTS = 100

# Points per axis of the 3D regression grid (20 x 20 = 400 evaluations)
DEFAULT_SURFACE_POINTS_X = 20
DEFAULT_SURFACE_POINTS_Y = 20

# A linear sample needs both endpoints
MIN_SAMPLE_POINTS = 2


# ============================================
# Series Roles
# ============================================

ROLE_TRAINING = 'training'
ROLE_TEST = 'test'
ROLE_PREDICTION = 'prediction'
SERIES_ROLES = (ROLE_TRAINING, ROLE_TEST, ROLE_PREDICTION)

SERIES_NAMES = {
    ROLE_TRAINING: 'Training Data',
    ROLE_TEST: 'Test Data',
    ROLE_PREDICTION: 'Regression Line',
}

# Fixed palette so runs are visually comparable
SERIES_COLORS = {
    ROLE_TRAINING: 'blue',
    ROLE_TEST: 'red',
    ROLE_PREDICTION: 'green',
}

MODE_MARKERS = 'markers'
MODE_LINES = 'lines'


# ============================================
# Plot Titles
# ============================================

TITLE_2D = '2D Regression Plot'
TITLE_3D = '3D Regression Plot'


# ============================================
# Image Export
# ============================================

DEFAULT_IMAGE_WIDTH = 800
DEFAULT_IMAGE_HEIGHT = 600
DEFAULT_TEMPLATE = 'plotly_white'

# Formats written through Kaleido
STATIC_IMAGE_FORMATS = {
    '.png': 'png',
    '.jpg': 'jpeg',
    '.jpeg': 'jpeg',
    '.webp': 'webp',
    '.svg': 'svg',
    '.pdf': 'pdf',
}

HTML_SUFFIXES = {'.html', '.htm'}


# ============================================
# Environment Overrides
# ============================================

ENV_PREFIX = 'REGRESSION_VIZ_'
ENV_CURVE_POINTS = ENV_PREFIX + 'CURVE_POINTS'
ENV_SURFACE_POINTS_X = ENV_PREFIX + 'SURFACE_POINTS_X'
ENV_SURFACE_POINTS_Y = ENV_PREFIX + 'SURFACE_POINTS_Y'
ENV_IMAGE_WIDTH = ENV_PREFIX + 'IMAGE_WIDTH'
ENV_IMAGE_HEIGHT = ENV_PREFIX + 'IMAGE_HEIGHT'
ENV_TEMPLATE = ENV_PREFIX + 'TEMPLATE'
ENV_LOG_LEVEL = ENV_PREFIX + 'LOG_LEVEL'

DEFAULT_LOG_LEVEL = 'INFO'
