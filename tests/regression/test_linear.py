"""
Tests for fit_linear().
"""

import numpy as np
import pytest
from scipy import stats

from pycurvefit import DataSource, InsufficientDataError, fit_linear
from pycurvefit.core.exceptions import DimensionError
from pycurvefit.regression.solution import CurveSolution


class TestLinearRecovery:
    """fit_linear() recovers known lines."""

    def test_exact_line(self, line_table):
        result = fit_linear(line_table)
        assert isinstance(result, CurveSolution)
        np.testing.assert_allclose(result.as_array(), [2.0, 3.0], atol=1e-9)

    def test_result_vector_has_two_entries(self, line_table):
        a, b = fit_linear(line_table)
        assert a == pytest.approx(2.0, abs=1e-9)
        assert b == pytest.approx(3.0, abs=1e-9)
        assert len(fit_linear(line_table)) == 2

    def test_nested_lists(self):
        result = fit_linear([[0, 1], [1, 3], [2, 5]])
        np.testing.assert_allclose(np.asarray(result), [1.0, 2.0], atol=1e-12)

    def test_matches_scipy(self, rng):
        x = rng.uniform(-5, 5, 200)
        y = -0.7 + 1.9 * x + rng.standard_normal(200)
        ref = stats.linregress(x, y)
        result = fit_linear(np.column_stack([x, y]))
        np.testing.assert_allclose(
            result.coefficients, [ref.intercept, ref.slope], rtol=1e-10
        )

    def test_from_source(self, line_table):
        ds = DataSource.from_arrays(line_table[:, 0], line_table[:, 1], name='s')
        by_index = fit_linear(ds, 0)
        by_name = fit_linear(ds, 's')
        default = fit_linear(ds)
        np.testing.assert_array_equal(by_index.as_array(), by_name.as_array())
        np.testing.assert_array_equal(by_index.as_array(), default.as_array())
        np.testing.assert_allclose(by_index.as_array(), [2.0, 3.0], atol=1e-9)


class TestLinearEdgeCases:
    """Degenerate and undersized inputs for fit_linear()."""

    def test_one_point_raises(self):
        with pytest.raises(InsufficientDataError):
            fit_linear([[1.0, 2.0]])

    def test_empty_raises(self):
        with pytest.raises(InsufficientDataError):
            fit_linear([])

    def test_nan_filtering_can_leave_too_few(self):
        with pytest.raises(InsufficientDataError):
            fit_linear([[1.0, 2.0], [np.nan, 3.0], [4.0, np.nan]])

    def test_constant_x_gives_non_finite_slope(self):
        result = fit_linear([[2.0, 1.0], [2.0, 2.0], [2.0, 3.0]])
        assert not np.isfinite(result.coefficients[1])

    def test_wrong_shape(self):
        with pytest.raises(DimensionError):
            fit_linear(np.zeros((4, 3)))

    def test_series_with_table_rejected(self, line_table):
        with pytest.raises(ValueError, match="series"):
            fit_linear(line_table, 0)

    def test_unknown_backend(self, line_table):
        with pytest.raises(ValueError, match="Unknown backend"):
            fit_linear(line_table, backend='gpu')


class TestLinearMissing:
    """NaN handling in fit_linear()."""

    def test_nan_rows_are_ignored(self, line_table):
        dirty = np.insert(line_table, [1, 3], [[np.nan, 7.0], [1.5, np.nan]], axis=0)
        clean = fit_linear(line_table)
        result = fit_linear(dirty)
        np.testing.assert_array_equal(result.as_array(), clean.as_array())
        assert result.n_dropped == 2
        assert result.n_observations == 5

    def test_keep_nan_propagates(self, line_table):
        dirty = np.vstack([line_table, [[np.nan, 1.0]]])
        result = fit_linear(dirty, drop_nan=False)
        assert np.all(np.isnan(result.coefficients))


class TestLinearPurity:
    """fit_linear() is deterministic and leaves inputs untouched."""

    def test_repeated_calls_bit_identical(self, rng):
        table = rng.standard_normal((50, 2))
        first = fit_linear(table).as_array()
        second = fit_linear(table).as_array()
        np.testing.assert_array_equal(first, second)

    def test_input_not_modified(self, line_table):
        before = line_table.copy()
        fit_linear(line_table)
        np.testing.assert_array_equal(line_table, before)
