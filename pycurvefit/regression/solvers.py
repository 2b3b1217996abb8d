"""
Solver dispatch for curve fitting.

This module provides the public fit functions and backend selection.
"""

import warnings
from typing import Any, Hashable, Literal

from pycurvefit.core.exceptions import DegenerateSystemWarning
from pycurvefit.core.protocols import SeriesSource
from pycurvefit.core.validation import check_order
from pycurvefit.regression.design import CurveDesign
from pycurvefit.regression.solution import CurveSolution
from pycurvefit.regression.backends.cpu import (
    CPULinearBackend,
    CPUPowerBackend,
    CPUPolynomialBackend,
)


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def fit_linear(
    data: Any,
    series: Hashable | None = None,
    *,
    drop_nan: bool = True,
    backend: BackendChoice = 'auto',
) -> CurveSolution:
    """
    Fit y = a + b*x by ordinary least squares.

    Args:
        data: Either a table of (x, y) rows (array-like of shape (n, 2)),
            or any SeriesSource.
        series: Series to fit when data is a SeriesSource (default 0).
            Must be None for tables.
        drop_nan: Remove pairs with a NaN coordinate before fitting. With
            False, NaN propagates into the coefficients.
        backend: Computational backend ('auto' or 'cpu').

    Returns:
        CurveSolution; as a vector it is [a, b].

    Raises:
        InsufficientDataError: Fewer than 2 observations
        DimensionError: Table is not shaped (n, 2)
        ValidationError: Non-numeric table

    Example:
        >>> from pycurvefit import fit_linear
        >>> a, b = fit_linear([[0, 2], [1, 5], [2, 8]])
    """
    design = _build_design(data, series, drop_nan=drop_nan)
    _check_backend(backend)
    result = CPULinearBackend().solve(design)
    return CurveSolution(_result=result, _design=design)


def fit_power(
    data: Any,
    series: Hashable | None = None,
    *,
    drop_nan: bool = True,
    backend: BackendChoice = 'auto',
) -> CurveSolution:
    """
    Fit y = a * x^b by least squares on ln(y) = ln(a) + b*ln(x).

    Arguments as for fit_linear. Non-positive x or y values are not
    rejected; their logarithms are NaN (or -inf) and so are the resulting
    coefficients.

    Returns:
        CurveSolution; as a vector it is [a, b].

    Raises:
        InsufficientDataError: Fewer than 2 observations
    """
    design = _build_design(data, series, drop_nan=drop_nan)
    _check_backend(backend)
    result = CPUPowerBackend().solve(design)
    return CurveSolution(_result=result, _design=design)


def fit_polynomial(
    data: Any,
    *args: Any,
    order: int | None = None,
    series: Hashable | None = None,
    backend: BackendChoice = 'auto',
) -> CurveSolution:
    """
    Fit y = a0 + a1*x + ... + ak*x^k by least squares.

    Call as fit_polynomial(table, order) or
    fit_polynomial(source, series, order); order and series may also be
    given by keyword. NaN pairs are always removed.

    The normal equations are reduced without magnitude pivoting. If they
    turn out singular, the fit does not fail: the unresolved coefficients
    are 0, solution.degenerate is True and a DegenerateSystemWarning is
    issued. A pivot that is zero only in some rows below it (for example
    Σx = 0 when x is symmetric about 0) is divided through instead, which
    gives NaN/inf coefficients and leaves degenerate False.

    Returns:
        CurveSolution; as a vector it is [a0, ..., ak, R²].

    Raises:
        InsufficientDataError: Fewer than order + 1 valid observations
        ValidationError: order is not an integer >= 1
        TypeError: Wrong number of positional arguments

    Example:
        >>> from pycurvefit import fit_polynomial
        >>> sol = fit_polynomial(table, 2)
        >>> a0, a1, a2, r2 = sol
    """
    is_source = isinstance(data, SeriesSource)
    max_args = 2 if is_source else 1
    if len(args) > max_args:
        raise TypeError(
            f"fit_polynomial() takes at most {max_args + 1} positional "
            f"arguments ({len(args) + 1} given)"
        )
    if len(args) == 2:
        series = _merge('series', series, args[0])
        order = _merge('order', order, args[1])
    elif len(args) == 1:
        # A lone positional is the order, unless order came by keyword
        if is_source and order is not None:
            series = _merge('series', series, args[0])
        else:
            order = _merge('order', order, args[0])
    if order is None:
        raise TypeError("fit_polynomial() missing required argument: 'order'")
    order = check_order(order)

    design = _build_design(data, series, drop_nan=True)
    _check_backend(backend)
    result = CPUPolynomialBackend(order).solve(design)

    for message in result.warnings:
        warnings.warn(message, DegenerateSystemWarning, stacklevel=2)

    return CurveSolution(_result=result, _design=design)


def _build_design(data: Any, series: Hashable | None, *, drop_nan: bool) -> CurveDesign:
    """Dispatch to the right CurveDesign constructor."""
    if isinstance(data, CurveDesign):
        if series is not None:
            raise ValueError("series cannot be combined with a CurveDesign")
        return data.complete() if drop_nan else data
    if isinstance(data, SeriesSource):
        return CurveDesign.from_source(
            data, 0 if series is None else series, drop_nan=drop_nan
        )
    if series is not None:
        raise ValueError(
            "series is only valid when data is a SeriesSource; "
            f"got {type(data).__name__}"
        )
    return CurveDesign.from_table(data, drop_nan=drop_nan)


def _merge(name: str, keyword: Any, positional: Any) -> Any:
    if keyword is not None:
        raise TypeError(f"fit_polynomial() got multiple values for argument {name!r}")
    return positional


def _check_backend(choice: BackendChoice) -> None:
    """
    Validate the backend choice.

    Only the CPU reference backends exist; 'auto' resolves to them.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice not in ('auto', 'cpu'):
        raise ValueError(f"Unknown backend: {choice!r}")
