"""
Tests for input validators.
"""

import numpy as np
import pytest

from pycurvefit.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    ValidationError,
)
from pycurvefit.core.validation import (
    check_array,
    check_consistent_length,
    check_min_samples,
    check_order,
    check_pairs,
)


class TestCheckArray:
    """check_array() conversion and dtype rejection."""

    def test_list_converted_to_float64(self):
        arr = check_array([[1, 2], [3, 4]], 'data')
        assert arr.dtype == np.float64
        assert arr.shape == (2, 2)

    def test_nan_is_allowed(self):
        arr = check_array([1.0, np.nan], 'x')
        assert np.isnan(arr[1])

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], 'data')

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(['a', 'b'], 'data')

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], 'data')


class TestCheckPairs:
    """check_pairs() shape checks for (x, y) tables."""

    def test_accepts_n_by_2(self):
        check_pairs(np.zeros((4, 2)), 'data')

    def test_rejects_three_columns(self):
        with pytest.raises(DimensionError, match=r"\(n, 2\)"):
            check_pairs(np.zeros((4, 3)), 'data')

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_pairs(np.zeros(4), 'data')


class TestCheckConsistentLength:
    """check_consistent_length() across arrays."""

    def test_same_length_passes(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=('x', 'y'))

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=('x', 'y'))


class TestCheckMinSamples:
    """check_min_samples() thresholds and error attributes."""

    def test_enough(self):
        check_min_samples(2, 2, 'linear fit')

    def test_too_few(self):
        with pytest.raises(InsufficientDataError) as excinfo:
            check_min_samples(1, 2, 'linear fit')
        assert excinfo.value.required == 2
        assert excinfo.value.actual == 1


class TestCheckOrder:
    """check_order() accepts integers >= 1 only."""

    def test_valid(self):
        assert check_order(3) == 3

    def test_numpy_integer(self):
        assert check_order(np.int64(2)) == 2

    @pytest.mark.parametrize("bad", [0, -1])
    def test_below_one(self, bad):
        with pytest.raises(ValidationError, match=">= 1"):
            check_order(bad)

    @pytest.mark.parametrize("bad", [1.5, "2", True])
    def test_not_integer(self, bad):
        with pytest.raises(ValidationError, match="integer"):
            check_order(bad)
