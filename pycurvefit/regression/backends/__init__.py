"""
Curve fitting backends.

Available backends:
    CPULinearBackend: OLS line
    CPUPowerBackend: OLS on log-transformed data
    CPUPolynomialBackend: Normal equations + elimination
"""

from pycurvefit.regression.backends.cpu import (
    CPULinearBackend,
    CPUPowerBackend,
    CPUPolynomialBackend,
)

__all__ = [
    "CPULinearBackend",
    "CPUPowerBackend",
    "CPUPolynomialBackend",
]
