"""
Least-squares curve fitting.

Public API:
    fit_linear(data, series=None)          -> [a, b]          y = a + b*x
    fit_power(data, series=None)           -> [a, b]          y = a * x^b
    fit_polynomial(data, [series,] order)  -> [a0..ak, R²]

data is either a table of (x, y) rows or any SeriesSource. Every function
returns a CurveSolution, which also acts as the result vector.

Example:
    >>> from pycurvefit.regression import fit_polynomial
    >>> solution = fit_polynomial(table, 2)
    >>> print(solution.coefficients, solution.r_squared)
    >>> print(solution.summary())
"""

from pycurvefit.regression.design import CurveDesign
from pycurvefit.regression.solution import CurveSolution, CurveParams
from pycurvefit.regression.solvers import fit_linear, fit_power, fit_polynomial

__all__ = [
    "fit_linear",
    "fit_power",
    "fit_polynomial",
    "CurveDesign",
    "CurveSolution",
    "CurveParams",
]
