"""
Generic result container for all pycurvefit computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, warnings and inspection
while allowing each model to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (model, order, degenerate flag)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for curve fits.
    
    Type Parameters:
        P: The model-specific parameter payload type
        
    Attributes:
        params: Model-specific parameters (coefficients, R², ...)
        info: Structured metadata (model, order, degenerate, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
    
    Examples:
        >>> Result(
        ...     params=CurveParams(model='linear', coefficients=beta, ...),
        ...     info={'model': 'linear', 'n': 5},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_linear'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
