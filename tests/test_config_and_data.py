"""
Tests for settings loading, input helpers, adapters and logger setup.
"""

import logging

import pandas as pd
import pytest
from pydantic import ValidationError

from regression_viz.config import PlotSettings, load_settings
from regression_viz.constants import ENV_CURVE_POINTS, ENV_IMAGE_WIDTH
from regression_viz.errors import PlotInputError
from regression_viz.tools.adapters import estimator_prediction_function
from regression_viz.utils.data_loading import project_axis, to_observations
from regression_viz.utils.logging_utils import setup_logger


class TestSettings:
    """Test defaults, validation and environment overrides."""

    def test_defaults(self):
        """Test default sample counts and image size"""
        settings = PlotSettings()

        assert settings.curve_points == 100
        assert (settings.surface_points_x, settings.surface_points_y) == (20, 20)
        assert (settings.image_width, settings.image_height) == (800, 600)

    def test_rejects_fewer_than_two_points(self):
        """Test that fewer than two curve points is invalid"""
        with pytest.raises(ValidationError):
            PlotSettings(curve_points=1)

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test REGRESSION_VIZ_* variables override defaults"""
        monkeypatch.setenv(ENV_CURVE_POINTS, '50')
        monkeypatch.setenv(ENV_IMAGE_WIDTH, '1024')

        settings = load_settings(dotenv_path=str(tmp_path / 'missing.env'))

        assert settings.curve_points == 50
        assert settings.image_width == 1024

    def test_keyword_beats_environment(self, monkeypatch, tmp_path):
        """Test keyword overrides take precedence over the environment"""
        monkeypatch.setenv(ENV_CURVE_POINTS, '50')

        settings = load_settings(dotenv_path=str(tmp_path / 'missing.env'), curve_points=12)

        assert settings.curve_points == 12

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Test values read from an explicit .env path"""
        monkeypatch.delenv(ENV_CURVE_POINTS, raising=False)
        env_file = tmp_path / '.env'
        env_file.write_text(f'{ENV_CURVE_POINTS}=33\n')

        try:
            assert load_settings(dotenv_path=str(env_file)).curve_points == 33
        finally:
            monkeypatch.delenv(ENV_CURVE_POINTS, raising=False)

    def test_dotenv_found_from_working_directory(self, monkeypatch, tmp_path):
        """Test the caller's .env is found by searching up from the working directory"""
        monkeypatch.delenv(ENV_CURVE_POINTS, raising=False)
        (tmp_path / '.env').write_text(f'{ENV_CURVE_POINTS}=7\n')
        app_dir = tmp_path / 'app'
        app_dir.mkdir()
        monkeypatch.chdir(app_dir)

        try:
            assert load_settings().curve_points == 7
        finally:
            monkeypatch.delenv(ENV_CURVE_POINTS, raising=False)


class TestDataLoading:
    """Test observation normalization and axis projection."""

    def test_dataframe_rows_become_observations(self):
        """Test DataFrame rows converted to observation mappings"""
        df = pd.DataFrame({'x': [1.0, 2.0], 'y': [3.0, 4.0]})
        assert to_observations(df) == [{'x': 1.0, 'y': 3.0}, {'x': 2.0, 'y': 4.0}]

    def test_none_is_empty(self):
        """Test None treated as no observations"""
        assert to_observations(None) == []

    def test_single_mapping_rejected(self):
        """Test a bare mapping is not mistaken for a list of rows"""
        with pytest.raises(PlotInputError):
            to_observations({'x': 1.0})

    def test_projection_reads_only_requested_axis(self):
        """Test projection ignores unrelated keys"""
        data = [{'x': 1, 'note': 'a'}, {'x': 2.5, 'other': None}]
        assert project_axis(data, 'x') == [1.0, 2.5]

    @pytest.mark.parametrize("row", [{'y': 1.0}, {'x': 'abc'}, {'x': None}, {'x': float('nan')}])
    def test_bad_rows_name_axis(self, row):
        """Test bad values report the axis and the row index"""
        with pytest.raises(PlotInputError) as exc_info:
            project_axis([{'x': 1.0}, row], 'x')

        assert exc_info.value.axis == 'x'
        assert 'Observation 1' in str(exc_info.value)


class TestEstimatorAdapter:
    """Test wrapping fitted estimators."""

    def test_uses_feature_order(self):
        """Test the one-row frame follows the given feature order"""
        class Recorder:
            def __init__(self):
                self.frames = []

            def predict(self, frame):
                self.frames.append(frame)
                return [frame.iloc[0, 0] * 10 + frame.iloc[0, 1]]

        model = Recorder()
        fn = estimator_prediction_function(model, ['b', 'a'])

        assert fn({'a': 1.0, 'b': 2.0}) == 21.0
        assert list(model.frames[0].columns) == ['b', 'a']

    def test_requires_predict(self):
        """Test objects without predict are rejected"""
        with pytest.raises(TypeError):
            estimator_prediction_function(object(), ['x'])

    def test_requires_features(self):
        """Test an empty feature list is rejected"""
        class Model:
            def predict(self, frame):
                return [0.0]

        with pytest.raises(ValueError):
            estimator_prediction_function(Model(), [])


class TestSetupLogger:
    """Test idempotent logger configuration."""

    def test_single_handler(self):
        """Test repeated setup keeps one handler and updates the level"""
        name = 'regression_viz.test_setup'
        setup_logger(name, 'DEBUG')
        logger = setup_logger(name, 'warning')

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
