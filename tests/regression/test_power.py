"""
Tests for fit_power().
"""

import numpy as np
import pytest

from pycurvefit import DataSource, InsufficientDataError, fit_power


class TestPowerRecovery:
    """fit_power() recovers known power laws."""

    def test_exact_power_law(self, power_table):
        result = fit_power(power_table)
        np.testing.assert_allclose(result.as_array(), [5.0, 2.0], rtol=1e-9)

    def test_fractional_exponent(self):
        x = np.array([0.5, 1.0, 4.0, 9.0, 16.0])
        y = 3.0 * x ** -0.5
        result = fit_power(np.column_stack([x, y]))
        np.testing.assert_allclose(result.as_array(), [3.0, -0.5], rtol=1e-9)

    def test_predict(self, power_table):
        result = fit_power(power_table)
        np.testing.assert_allclose(result.predict([1.0, 10.0]), [5.0, 500.0], rtol=1e-9)

    def test_from_source(self, power_table):
        ds = DataSource.from_series({'p': (power_table[:, 0], power_table[:, 1])})
        result = fit_power(ds, 'p')
        np.testing.assert_allclose(result.as_array(), [5.0, 2.0], rtol=1e-9)


class TestPowerEdgeCases:
    """Non-positive and undersized inputs for fit_power()."""

    def test_one_point_raises(self):
        with pytest.raises(InsufficientDataError):
            fit_power([[1.0, 1.0]])

    def test_non_positive_values_propagate(self):
        result = fit_power([[0.0, 1.0], [1.0, 2.0], [2.0, 3.0]])
        assert not np.all(np.isfinite(result.coefficients))

    def test_negative_y_gives_nan(self):
        result = fit_power([[1.0, -1.0], [2.0, 2.0], [3.0, 3.0]])
        assert np.all(np.isnan(result.coefficients))

    def test_nan_rows_are_ignored(self, power_table):
        dirty = np.vstack([[np.nan, 1.0], power_table, [2.0, np.nan]])
        np.testing.assert_array_equal(
            fit_power(dirty).as_array(), fit_power(power_table).as_array()
        )
