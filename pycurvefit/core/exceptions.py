"""
Exception hierarchy for pycurvefit.

All exceptions inherit from PyCurveFitError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Non-finite arithmetic results are NOT errors; they propagate
"""


class PyCurveFitError(Exception):
    """Base exception for all pycurvefit errors."""
    pass


class ValidationError(PyCurveFitError, ValueError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when a table is not shaped as (n, 2) pairs or when
    x and y arrays have different lengths.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few usable observations for the requested model.
    
    Raised after NaN filtering when the sample count is below the
    model's minimum (2 for linear and power fits, order + 1 for
    polynomial fits).
    
    Attributes:
        required: Minimum number of observations for the model
        actual: Number of observations available
    """
    
    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class DegenerateSystemWarning(RuntimeWarning):
    """
    The polynomial normal equations could not be fully reduced.
    
    Issued when elimination runs out of nonzero pivots. The fit still
    returns; the unresolved coefficients are reported as zero.
    """
    pass
