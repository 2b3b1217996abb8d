"""
Sample extraction and missing data handling.

Turns a raw table or a SeriesSource into the ordered x and y arrays used
by the fitters, and removes pairs where either coordinate is NaN.
"""

from __future__ import annotations

from typing import Any, Hashable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.capabilities import CAPABILITY_MATERIALIZED
from pycurvefit.core.protocols import SeriesSource
from pycurvefit.core.validation import check_array, check_pairs


def extract_table(data: ArrayLike) -> tuple[NDArray, NDArray]:
    """
    Split an (n, 2) table of (x, y) rows into x and y arrays.

    Parameters
    ----------
    data : array-like
        Rows of (x, y) pairs. An empty input gives two empty arrays.

    Returns
    -------
    x, y : NDArray
        1D float64 copies, in row order.
    """
    table = check_array(data, 'data')
    if table.size == 0:
        table = table.reshape(0, 2)
    check_pairs(table, 'data')
    return table[:, 0].copy(), table[:, 1].copy()


def extract_series(source: SeriesSource, series: Hashable) -> tuple[NDArray, NDArray]:
    """
    Read every item of a series, in order, through the SeriesSource contract.

    Sources that can hand out whole arrays do so directly; anything else is
    read one item at a time. The source is never modified.
    """
    if _is_materialized(source):
        x, y = source.series_arrays(series)
        return np.array(x, dtype=np.float64), np.array(y, dtype=np.float64)

    n = source.item_count(series)
    x = np.fromiter(
        (source.x_value(series, i) for i in range(n)), dtype=np.float64, count=n
    )
    y = np.fromiter(
        (source.y_value(series, i) for i in range(n)), dtype=np.float64, count=n
    )
    return x, y


def complete_pairs(x: NDArray, y: NDArray) -> tuple[NDArray, NDArray, int]:
    """
    Drop pairs where either coordinate is NaN.

    Parameters
    ----------
    x, y : NDArray
        1D arrays of the same length.

    Returns
    -------
    x_clean, y_clean : NDArray
        Retained pairs, relative order preserved.
    n_dropped : int
        Number of pairs removed.
    """
    mask = pairwise_mask(x, y)
    n_dropped = int(mask.size - np.count_nonzero(mask))
    return x[mask], y[mask], n_dropped


def pairwise_mask(x: NDArray, y: NDArray) -> NDArray:
    """Boolean mask where both x and y are non-NaN. Infinities count as present."""
    return ~(np.isnan(x) | np.isnan(y))


def _is_materialized(source: Any) -> bool:
    supports = getattr(source, 'supports', None)
    return (
        callable(supports)
        and hasattr(source, 'series_arrays')
        and bool(supports(CAPABILITY_MATERIALIZED))
    )
