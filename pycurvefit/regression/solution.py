"""
Curve fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.result import Result

if TYPE_CHECKING:
    from pycurvefit.regression.design import CurveDesign


@dataclass(frozen=True)
class CurveParams:
    """
    Parameter payload for a curve fit.

    This is the immutable data computed by backends.

    coefficients holds [a, b] for linear and power models and
    [a0, ..., ak] for polynomials. r_squared is only computed for
    polynomials.
    """
    model: str
    coefficients: NDArray[np.floating[Any]]
    r_squared: float | None
    order: int
    n: int
    n_dropped: int
    degenerate: bool


@dataclass(frozen=True, eq=False)
class CurveSolution:
    """
    User-facing curve fit results.

    Wraps the backend Result. Also behaves like the fixed-length result
    vector ([a, b], or [a0, ..., ak, R²] for polynomials), so it can be
    indexed, unpacked or passed to numpy.asarray directly.
    """
    _result: Result[CurveParams]
    _design: 'CurveDesign'

    @property
    def model(self) -> str:
        """'linear', 'power' or 'polynomial'."""
        return self._result.params.model

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Model coefficients (read-only copy)."""
        coef = self._result.params.coefficients.copy()
        coef.flags.writeable = False
        return coef

    @property
    def order(self) -> int:
        return self._result.params.order

    @property
    def r_squared(self) -> float | None:
        """Coefficient of determination (polynomial fits only)."""
        return self._result.params.r_squared

    @property
    def degenerate(self) -> bool:
        """
        True if the normal equations ran out of nonzero pivots.

        The unresolved coefficients are then zero rather than estimates.
        """
        return self._result.params.degenerate

    @property
    def n_observations(self) -> int:
        """Number of observations the fit used."""
        return self._result.params.n

    @property
    def n_dropped(self) -> int:
        """Number of observations removed for containing NaN."""
        return self._result.params.n_dropped

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def design(self) -> 'CurveDesign':
        return self._design

    def as_array(self) -> NDArray[np.floating[Any]]:
        """
        Fixed-length result vector.

        Linear and power fits give [a, b]; polynomial fits of order k give
        [a0, ..., ak, R²] (length k + 2).
        """
        params = self._result.params
        if params.r_squared is None:
            return params.coefficients.copy()
        return np.append(params.coefficients, params.r_squared)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the fitted curve at x.

        NaN inputs give NaN outputs. For power fits, non-positive x follows
        numpy's power semantics.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        coef = self._result.params.coefficients
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            if self.model == 'power':
                return coef[0] * np.power(x_arr, coef[1])
            return np.polynomial.polynomial.polyval(x_arr, coef)

    # === Sequence behaviour of the result vector ===

    def __array__(self, dtype=None, copy=None) -> NDArray:
        arr = self.as_array()
        if dtype is not None:
            arr = arr.astype(dtype)
        return arr

    def __len__(self) -> int:
        return len(self.as_array())

    def __getitem__(self, index):
        return self.as_array()[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_array().tolist())

    def summary(self) -> str:
        """Generate a plain-text summary."""
        titles = {
            'linear': "Linear Fit: y = a + b*x",
            'power': "Power Fit: y = a * x^b",
            'polynomial': f"Polynomial Fit of Order {self.order}",
        }
        lines = [
            titles[self.model],
            "=" * 60,
            f"Observations: {self.n_observations}",
            f"Dropped (NaN): {self.n_dropped}",
        ]
        if self.r_squared is not None:
            lines.append(f"R-squared: {self.r_squared:.6f}")
        lines.extend([
            "",
            "Coefficients:",
            "-" * 60,
        ])

        if self.model == 'polynomial':
            names = [f"a{i}" for i in range(len(self._result.params.coefficients))]
        else:
            names = ['a', 'b']
        for name, coef in zip(names, self._result.params.coefficients):
            lines.append(f"  {name:<6} {coef:18.10g}")

        lines.append("-" * 60)
        if self.degenerate:
            lines.append("Degenerate system: unresolved coefficients set to 0")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        coef = ", ".join(f"{c:.6g}" for c in self._result.params.coefficients)
        text = f"CurveSolution(model={self.model!r}, coefficients=[{coef}]"
        if self.r_squared is not None:
            text += f", r_squared={self.r_squared:.4f}"
        return text + f", n={self.n_observations})"
