"""
In-memory series container for pycurvefit.

DataSource is the "I have series" abstraction. It doesn't know or care
which model will be fitted to it. It just answers the SeriesSource
questions: how many items, and what are their x and y values.

Usage:
    from pycurvefit import DataSource

    ds = DataSource.from_arrays(x, y)
    ds = DataSource.from_series({'north': (x1, y1), 'south': (x2, y2)})
    ds = DataSource.from_dataframe(df, x='time', y=['north', 'south'])
    ds = DataSource.from_file("data.csv", x='time', y='north')

    # Series are addressed by position or by name
    ds.item_count(0)
    ds.x_value('south', 3)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Hashable, Mapping, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.exceptions import ValidationError
from pycurvefit.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_MISSING_VALUES,
)
from pycurvefit.core.validation import check_1d, check_consistent_length

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class DataSource:
    """
    Ordered collection of named (x, y) series. Implements SeriesSource.

    Construct via factory classmethods, not directly.
    """
    _series: dict[Hashable, tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]]
    _capabilities: frozenset[str]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === SeriesSource ===

    def item_count(self, series: Hashable) -> int:
        """Number of items in a series."""
        return int(self._lookup(series)[0].shape[0])

    def x_value(self, series: Hashable, item: int) -> float:
        """x-value of an item (may be NaN)."""
        return float(self._lookup(series)[0][item])

    def y_value(self, series: Hashable, item: int) -> float:
        """y-value of an item (may be NaN)."""
        return float(self._lookup(series)[1][item])

    # === Array Access ===

    def series_arrays(
        self, series: Hashable
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Return read-only views of a series' x and y arrays.

        Example:
            >>> ds = DataSource.from_arrays([1, 2, 3], [2, 4, 6])
            >>> x, y = ds.series_arrays(0)
        """
        x, y = self._lookup(series)
        x = x.view()
        y = y.view()
        x.flags.writeable = False
        y.flags.writeable = False
        return x, y

    def keys(self) -> tuple[Hashable, ...]:
        """Series names, in positional order."""
        return tuple(self._series.keys())

    def __contains__(self, series: Hashable) -> bool:
        return series in self._series

    def _lookup(self, series: Hashable):
        if series in self._series:
            return self._series[series]
        if isinstance(series, (int, np.integer)) and not isinstance(series, bool):
            names = self.keys()
            if 0 <= series < len(names):
                return self._series[names[series]]
            raise IndexError(
                f"Series index {series} out of range for DataSource with "
                f"{len(names)} series"
            )
        raise KeyError(
            f"DataSource has no series {series!r}. Available: {list(self.keys())}"
        )

    # === Properties ===

    @property
    def series_count(self) -> int:
        """Number of series."""
        return len(self._series)

    @property
    def metadata(self) -> dict[str, Any]:
        """Descriptive metadata (origin, column names, ...)."""
        return self._metadata.copy()

    def supports(self, capability: str) -> bool:
        """
        Check if this DataSource supports a capability.

        Note:
            Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, name: Hashable = 'series') -> DataSource:
        """Construct a single-series source from x and y arrays."""
        return cls.from_series({name: (x, y)}, source='arrays')

    @classmethod
    def from_series(
        cls,
        series: Mapping[Hashable, tuple[ArrayLike, ArrayLike]],
        *,
        source: str = 'series',
    ) -> DataSource:
        """Construct from a mapping of name -> (x, y)."""
        storage = {}
        for name, (x, y) in series.items():
            x_arr = np.array(x, dtype=np.float64)
            y_arr = np.array(y, dtype=np.float64)
            check_1d(x_arr, f"{name!r} x")
            check_1d(y_arr, f"{name!r} y")
            check_consistent_length(x_arr, y_arr, names=(f"{name!r} x", f"{name!r} y"))
            storage[name] = (x_arr, y_arr)

        has_missing = any(
            np.isnan(x).any() or np.isnan(y).any() for x, y in storage.values()
        )
        capabilities = {CAPABILITY_MATERIALIZED}
        if has_missing:
            capabilities.add(CAPABILITY_MISSING_VALUES)

        return cls(
            _series=storage,
            _capabilities=frozenset(capabilities),
            _metadata={'source': source, 'series': list(storage.keys())},
        )

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        x: str,
        y: str | list[str] | None = None,
        source_path: str | None = None,
    ) -> DataSource:
        """
        Construct from a pandas DataFrame.

        Every y column becomes one series sharing the x column. If y is
        None, all columns other than x are used.
        """
        if x not in df.columns:
            raise ValidationError(f"DataFrame has no column {x!r}")
        if y is None:
            y_cols = [c for c in df.columns if c != x]
        elif isinstance(y, str):
            y_cols = [y]
        else:
            y_cols = list(y)
        if not y_cols:
            raise ValidationError("No y columns available")

        x_arr = df[x].to_numpy(dtype=np.float64)
        ds = cls.from_series(
            {col: (x_arr, df[col].to_numpy(dtype=np.float64)) for col in y_cols},
            source='dataframe',
        )
        ds._metadata['x_column'] = x
        if source_path:
            ds._metadata['source_path'] = source_path
        return ds

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        x: str,
        y: str | list[str] | None = None,
    ) -> DataSource:
        """Construct from a CSV/TSV file."""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.csv':
            import pandas as pd
            df = pd.read_csv(path)
        elif suffix == '.tsv':
            import pandas as pd
            df = pd.read_csv(path, sep='\t')
        else:
            raise ValidationError(f"Unknown file format: {suffix}")
        return cls.from_dataframe(df, x=x, y=y, source_path=str(path))
