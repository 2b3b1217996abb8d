"""
CPU reference backends for curve fitting.

Closed-form OLS for lines and power laws, and normal equations reduced by
the elimination solver for polynomials. All arithmetic is float64 NumPy
with IEEE-754 semantics: degenerate inputs produce inf/NaN in the result
rather than exceptions.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycurvefit.core.result import Result
from pycurvefit.core.compute.timing import Timer
from pycurvefit.core.validation import check_min_samples
from pycurvefit.regression.design import CurveDesign
from pycurvefit.regression.solution import CurveParams
from pycurvefit.regression._normal import build_normal_equations
from pycurvefit.regression._elimination import solve_augmented

# Fewest observations that determine a line (also used for power laws)
MIN_LINEAR_SAMPLES = 2


def ols_line(x: NDArray, y: NDArray) -> NDArray:
    """
    Closed-form least-squares line through (x, y).

    Uses the centered sums Sxx = Σx² - (Σx)²/n and Sxy = Σxy - ΣxΣy/n.
    Identical x values make Sxx zero; the slope is then inf or NaN.

    Returns:
        array([a, b]) for y = a + b*x
    """
    n = x.shape[0]
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        sum_x = x.sum()
        sum_y = y.sum()
        sum_xx = (x * x).sum()
        sum_xy = (x * y).sum()

        sxx = sum_xx - (sum_x * sum_x) / n
        sxy = sum_xy - (sum_x * sum_y) / n
        xbar = sum_x / n
        ybar = sum_y / n

        slope = sxy / sxx
        intercept = ybar - slope * xbar
    return np.array([intercept, slope], dtype=np.float64)


class CPULinearBackend:
    """Ordinary least squares fit of y = a + b*x."""

    @property
    def name(self) -> str:
        return 'cpu_linear'

    def solve(self, design: CurveDesign) -> Result[CurveParams]:
        check_min_samples(design.n, MIN_LINEAR_SAMPLES, 'linear fit')

        timer = Timer()
        timer.start()
        with timer.section('accumulate'):
            coefficients = ols_line(design.x, design.y)
        timer.stop()

        params = CurveParams(
            model='linear',
            coefficients=coefficients,
            r_squared=None,
            order=1,
            n=design.n,
            n_dropped=design.n_dropped,
            degenerate=False,
        )
        return Result(
            params=params,
            info={'model': 'linear', 'n': design.n, 'n_dropped': design.n_dropped},
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUPowerBackend:
    """
    Power-law fit of y = a * x^b via OLS on (ln x, ln y).

    Non-positive values give NaN or -inf logarithms which flow through to
    the coefficients unchanged.
    """

    @property
    def name(self) -> str:
        return 'cpu_power'

    def solve(self, design: CurveDesign) -> Result[CurveParams]:
        check_min_samples(design.n, MIN_LINEAR_SAMPLES, 'power fit')

        timer = Timer()
        timer.start()
        with timer.section('log_transform'):
            with np.errstate(divide='ignore', invalid='ignore'):
                log_x = np.log(design.x)
                log_y = np.log(design.y)
        with timer.section('accumulate'):
            log_a, b = ols_line(log_x, log_y)
            with np.errstate(over='ignore', invalid='ignore'):
                a = np.exp(log_a)
        timer.stop()

        params = CurveParams(
            model='power',
            coefficients=np.array([a, b], dtype=np.float64),
            r_squared=None,
            order=1,
            n=design.n,
            n_dropped=design.n_dropped,
            degenerate=False,
        )
        return Result(
            params=params,
            info={'model': 'power', 'n': design.n, 'n_dropped': design.n_dropped},
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUPolynomialBackend:
    """
    Polynomial fit of y = a0 + a1*x + ... + ak*x^k.

    Algorithm:
        1. Drop NaN pairs (always, regardless of how the design was built)
        2. Build the (k+1, k+2) augmented normal equations from power sums
        3. Reduce with row-0-as-pivot elimination and back-substitute
        4. R² = Σ(ŷ - ȳ)² / Σ(y - ȳ)²
    """

    def __init__(self, order: int):
        self._order = order

    @property
    def name(self) -> str:
        return 'cpu_polynomial'

    @property
    def order(self) -> int:
        return self._order

    def solve(self, design: CurveDesign) -> Result[CurveParams]:
        order = self._order
        check_min_samples(design.n, order + 1, f'polynomial fit of order {order}')
        design = design.complete()
        check_min_samples(design.n, order + 1, f'polynomial fit of order {order}')

        x, y = design.x, design.y
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            with np.errstate(over='ignore', invalid='ignore'):
                matrix = build_normal_equations(x, y, order)

        with timer.section('elimination'):
            solved = solve_augmented(matrix)

        with timer.section('r_squared'):
            r_squared = _r_squared(x, y, solved.coefficients)

        timer.stop()

        warnings: tuple[str, ...] = ()
        if solved.degenerate:
            warnings = (
                f"Normal equations are degenerate: only {solved.resolved} of "
                f"{order + 1} coefficients could be resolved; the rest are "
                f"reported as 0",
            )

        params = CurveParams(
            model='polynomial',
            coefficients=solved.coefficients,
            r_squared=r_squared,
            order=order,
            n=design.n,
            n_dropped=design.n_dropped,
            degenerate=solved.degenerate,
        )
        info: dict[str, Any] = {
            'model': 'polynomial',
            'order': order,
            'n': design.n,
            'n_dropped': design.n_dropped,
            'degenerate': solved.degenerate,
            'resolved': solved.resolved,
        }
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


def _r_squared(x: NDArray, y: NDArray, coefficients: NDArray) -> float:
    """Explained over total sum of squares. Constant y gives NaN or inf."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        fitted = np.polynomial.polynomial.polyval(x, coefficients)
        y_mean = y.sum() / y.shape[0]
        ss_regression = np.sum((fitted - y_mean) ** 2)
        ss_total = np.sum((y - y_mean) ** 2)
        return float(ss_regression / ss_total)
