"""
Curve-fitting Design.

Design wraps a table or a SeriesSource and extracts the ordered sample
set (x, y) for one fit. It knows it's feeding a curve fit; the source
doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.protocols import SeriesSource
from pycurvefit.core.validation import check_1d, check_array, check_consistent_length
from pycurvefit.regression._missing import complete_pairs, extract_series, extract_table


@dataclass(frozen=True)
class CurveDesign:
    """
    Sample set for a single fit.

    Holds the observations that survived extraction, in their original
    relative order. Immutable after construction; minimum-count checks
    belong to the fitter, since they depend on the model.

    Construction:
        CurveDesign.from_table(data)                # rows of (x, y)
        CurveDesign.from_source(source, series)      # any SeriesSource
        CurveDesign.from_arrays(x, y)                # parallel arrays
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n_dropped: int = 0
    _source: SeriesSource | None = None
    _series: Hashable | None = None

    @classmethod
    def from_table(cls, data: ArrayLike, *, drop_nan: bool = True) -> CurveDesign:
        """Build from an (n, 2) table of (x, y) rows."""
        x, y = extract_table(data)
        return cls._build(x, y, drop_nan=drop_nan)

    @classmethod
    def from_source(
        cls,
        source: SeriesSource,
        series: Hashable = 0,
        *,
        drop_nan: bool = True,
    ) -> CurveDesign:
        """Build from one series of a SeriesSource."""
        x, y = extract_series(source, series)
        return cls._build(x, y, drop_nan=drop_nan, source=source, series=series)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, drop_nan: bool = True) -> CurveDesign:
        """Build directly from parallel x and y arrays."""
        x_arr = check_array(x, 'x').copy()
        y_arr = check_array(y, 'y').copy()
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls._build(x_arr, y_arr, drop_nan=drop_nan)

    @classmethod
    def _build(
        cls,
        x: NDArray,
        y: NDArray,
        *,
        drop_nan: bool,
        source: SeriesSource | None = None,
        series: Hashable | None = None,
    ) -> CurveDesign:
        n_dropped = 0
        if drop_nan:
            x, y, n_dropped = complete_pairs(x, y)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y, _n_dropped=n_dropped, _source=source, _series=series)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Retained x values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Retained y values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of retained observations."""
        return int(self._x.shape[0])

    @property
    def n_dropped(self) -> int:
        """Number of pairs removed because a coordinate was NaN."""
        return self._n_dropped

    @property
    def source(self) -> SeriesSource | None:
        """Original SeriesSource, if the design was built from one."""
        return self._source

    @property
    def series(self) -> Hashable | None:
        return self._series

    def has_missing(self) -> bool:
        """True if any retained coordinate is NaN (only possible with drop_nan=False)."""
        return bool(np.isnan(self._x).any() or np.isnan(self._y).any())

    def complete(self) -> CurveDesign:
        """
        Return a design with NaN pairs removed.

        Returns self when nothing needs removing.
        """
        if not self.has_missing():
            return self
        x, y, dropped = complete_pairs(self._x, self._y)
        x.flags.writeable = False
        y.flags.writeable = False
        return CurveDesign(
            _x=x,
            _y=y,
            _n_dropped=self._n_dropped + dropped,
            _source=self._source,
            _series=self._series,
        )
