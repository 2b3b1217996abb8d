"""
pycurvefit: least-squares fitting of lines, power laws and polynomials
to two-dimensional series.

Submodules:
    regression: fit_linear, fit_power, fit_polynomial
    core: DataSource, protocols, exceptions, validation
"""

__version__ = "0.1.0"

from pycurvefit import regression
from pycurvefit.core.datasource import DataSource
from pycurvefit.core.protocols import SeriesSource
from pycurvefit.core.exceptions import (
    PyCurveFitError,
    ValidationError,
    InsufficientDataError,
    DegenerateSystemWarning,
)
from pycurvefit.regression import (
    fit_linear,
    fit_power,
    fit_polynomial,
    CurveSolution,
)

__all__ = [
    "__version__",
    "regression",
    "DataSource",
    "SeriesSource",
    "PyCurveFitError",
    "ValidationError",
    "InsufficientDataError",
    "DegenerateSystemWarning",
    "fit_linear",
    "fit_power",
    "fit_polynomial",
    "CurveSolution",
]
