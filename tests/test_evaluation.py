"""
Unit tests for model evaluation over sample grids.
"""

from unittest.mock import Mock

import numpy as np
import pytest

from regression_viz.errors import EvaluationError
from regression_viz.models import Domain, PlaneAxes, SpaceAxes
from regression_viz.tools.evaluation import evaluate_curve, evaluate_surface
from regression_viz.tools.sampling import sample_grid, sample_linear


class TestEvaluateCurve:
    """Test one-input prediction functions."""

    def test_matches_closed_form(self):
        """Test predictions of a linear function at every sample"""
        xs = sample_linear(Domain(min=1.0, max=6.0), 100)
        ys = evaluate_curve(xs, PlaneAxes(x='x', y='y'), lambda p: 2 * p['x'] + 0.1)

        assert len(ys) == len(xs)
        for x, y in zip(xs, ys):
            assert y == pytest.approx(2 * x + 0.1)

    def test_called_with_single_named_field(self):
        """Test the function receives only the x axis by name"""
        fn = Mock(return_value=1.0)
        evaluate_curve([0.5, 1.5], PlaneAxes(x='runtime', y='score'), fn)

        assert fn.call_count == 2
        assert fn.call_args_list[0].args[0] == {'runtime': 0.5}
        assert fn.call_args_list[1].args[0] == {'runtime': 1.5}

    def test_accepts_numpy_results(self):
        """Test single-element numpy results are unwrapped"""
        ys = evaluate_curve([1.0, 2.0], PlaneAxes(x='x', y='y'), lambda p: np.array([p['x'] * 3]))
        assert ys == [3.0, 6.0]

    def test_failure_aborts_and_names_sample(self):
        """Test evaluation stops at the first failure and reports it"""
        calls = []

        def fn(point):
            calls.append(point)
            if len(calls) == 6:
                raise ZeroDivisionError("boom")
            return point['x']

        with pytest.raises(EvaluationError) as exc_info:
            evaluate_curve(list(range(10)), PlaneAxes(x='x', y='y'), fn)

        error = exc_info.value
        assert error.index == 5
        assert error.point == {'x': 5.0}
        assert isinstance(error.__cause__, ZeroDivisionError)
        assert len(calls) == 6

    @pytest.mark.parametrize("bad_result", [None, "1.0", True, float('nan'), float('inf')])
    def test_non_numeric_result_fails(self, bad_result):
        """Test non-numeric or non-finite results are rejected"""
        with pytest.raises(EvaluationError) as exc_info:
            evaluate_curve([1.0], PlaneAxes(x='x', y='y'), lambda p: bad_result)

        assert exc_info.value.index == 0


class TestEvaluateSurface:
    """Test two-input prediction functions."""

    def test_called_with_both_fields_in_grid_order(self):
        """Test both inputs passed by name in grid order"""
        fn = Mock(side_effect=lambda p: p['a'] * 10 + p['b'])
        grid = [(1.0, 2.0), (1.0, 3.0), (2.0, 2.0)]
        zs = evaluate_surface(grid, SpaceAxes(x='a', y='b', z='c'), fn)

        assert zs == [12.0, 13.0, 22.0]
        assert fn.call_args_list[0].args[0] == {'a': 1.0, 'b': 2.0}

    def test_corner_prediction(self):
        """Test the prediction at the first grid corner"""
        grid = sample_grid(Domain(min=1.0, max=6.0), Domain(min=2.0, max=12.0))
        zs = evaluate_surface(grid, SpaceAxes(x='x', y='y', z='z'), lambda p: p['x'] + p['y'] + 0.1)

        assert len(zs) == 400
        assert grid[0] == (1.0, 2.0)
        assert zs[0] == pytest.approx(3.1)
        assert zs[-1] == pytest.approx(18.1)

    def test_failure_reports_point(self):
        """Test a 3D failure carries the offending point"""
        def fn(point):
            if point['y'] > 1.5:
                raise RuntimeError("model exploded")
            return 0.0

        with pytest.raises(EvaluationError) as exc_info:
            evaluate_surface([(0.0, 1.0), (0.0, 2.0)], SpaceAxes(x='x', y='y', z='z'), fn)

        assert exc_info.value.index == 1
        assert exc_info.value.point == {'x': 0.0, 'y': 2.0}
        assert 'model exploded' in str(exc_info.value)
