"""
Input validation utilities for pycurvefit.

These validators follow the "fail fast, fail loud" principle for malformed
inputs. They raise immediately with clear error messages rather than
silently correcting or making assumptions about user intent.

Note that NaN and Inf are NOT validation failures here: missing values are
filtered by the extractor and non-finite arithmetic propagates into results.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycurvefit.core.exceptions import (
    ValidationError,
    DimensionError,
    InsufficientDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating ragged, mixed or non-numeric
    data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_pairs(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a table of (x, y) rows, i.e. has shape (n, 2).
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D with exactly two columns
    """
    check_2d(array, name)
    if array.shape[1] != 2:
        raise DimensionError(
            f"{name}: expected (n, 2) table of (x, y) pairs, got shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]], 
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).
    
    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    
    if len(arrays) < 2:
        return
    
    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify there are at least the minimum number of usable samples.
    
    Args:
        n: Number of usable samples
        min_samples: Minimum required samples
        name: Model or parameter name for error messages
        
    Raises:
        InsufficientDataError: If n < min_samples
    """
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} valid observations, got {n}",
            required=min_samples,
            actual=n,
        )


def check_order(order: Any, name: str = 'order') -> int:
    """
    Validate a polynomial order.
    
    Args:
        order: Requested polynomial order
        name: Parameter name for error messages
        
    Returns:
        The order as a plain int
        
    Raises:
        ValidationError: If order is not an integer >= 1
    """
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(order).__name__}"
        )
    if order < 1:
        raise ValidationError(f"{name}: must be >= 1, got {order}")
    return int(order)
