"""
Tests for CurveSolution accessors and formatting.
"""

import numpy as np
import pytest

from pycurvefit import fit_linear, fit_polynomial, fit_power


class TestSolutionVector:
    """CurveSolution as a fixed-length result vector."""

    def test_linear_vector(self, line_table):
        result = fit_linear(line_table)
        assert result.as_array().shape == (2,)
        assert result.r_squared is None
        assert result.model == 'linear'

    def test_polynomial_vector_appends_r_squared(self, quadratic_table):
        result = fit_polynomial(quadratic_table, 2)
        vector = result.as_array()
        assert vector.shape == (4,)
        assert vector[-1] == result.r_squared
        np.testing.assert_array_equal(vector[:-1], result.coefficients)

    def test_numpy_conversion_and_indexing(self, quadratic_table):
        result = fit_polynomial(quadratic_table, 2)
        np.testing.assert_array_equal(np.asarray(result), result.as_array())
        assert result[-1] == result.r_squared
        assert list(result) == result.as_array().tolist()

    def test_coefficients_read_only(self, line_table):
        result = fit_linear(line_table)
        with pytest.raises(ValueError):
            result.coefficients[0] = 0.0

    def test_as_array_is_a_copy(self, line_table):
        result = fit_linear(line_table)
        vector = result.as_array()
        vector[0] = 123.0
        assert result.as_array()[0] != 123.0


class TestPredict:
    """CurveSolution.predict() evaluation."""

    def test_linear(self, line_table):
        result = fit_linear(line_table)
        np.testing.assert_allclose(result.predict([10.0, -1.0]), [32.0, -1.0], atol=1e-9)

    def test_polynomial(self, quadratic_table):
        result = fit_polynomial(quadratic_table, 2)
        np.testing.assert_allclose(result.predict(5.0), 86.0, rtol=1e-9)

    def test_nan_input(self, line_table):
        result = fit_linear(line_table)
        assert np.isnan(result.predict([np.nan])[0])


class TestMetadata:
    """Backend names and timing breakdown."""

    def test_backend_and_timing(self, quadratic_table):
        result = fit_polynomial(quadratic_table, 2)
        assert result.backend_name == 'cpu_polynomial'
        assert result.timing['total_seconds'] >= 0.0
        assert 'elimination' in result.timing
        assert result.info['order'] == 2

    def test_power_backend_name(self, power_table):
        assert fit_power(power_table).backend_name == 'cpu_power'


class TestFormatting:
    """summary() and repr output."""

    def test_summary_polynomial(self, quadratic_table):
        text = fit_polynomial(quadratic_table, 2).summary()
        assert "Polynomial Fit of Order 2" in text
        assert "R-squared" in text
        assert "a2" in text
        assert "Backend: cpu_polynomial" in text

    def test_summary_power(self, power_table):
        text = fit_power(power_table).summary()
        assert "y = a * x^b" in text
        assert "R-squared" not in text

    def test_summary_degenerate(self):
        with pytest.warns(RuntimeWarning):
            result = fit_polynomial([[1.0, 1.0], [1.0, 2.0]], 1)
        assert "Degenerate" in result.summary()

    def test_repr(self, line_table):
        text = repr(fit_linear(line_table))
        assert text.startswith("CurveSolution(model='linear'")
        assert "n=5" in text
