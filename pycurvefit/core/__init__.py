"""
Core infrastructure for pycurvefit.

This module provides shared abstractions and utilities used by the
regression engine.

Key components:
    protocols: SeriesSource, Backend protocols
    datasource: In-memory SeriesSource implementation
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pycurvefit.core.protocols import SeriesSource, Backend
from pycurvefit.core.datasource import DataSource
from pycurvefit.core.result import Result
from pycurvefit.core.exceptions import (
    PyCurveFitError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    DegenerateSystemWarning,
)

__all__ = [
    # Protocols
    "SeriesSource",
    "Backend",
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "PyCurveFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "DegenerateSystemWarning",
]
