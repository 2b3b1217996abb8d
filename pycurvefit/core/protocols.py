"""
Core protocols for pycurvefit.

These define structural interfaces that data providers and backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal typing)
so that any series container (flat table, ring-buffered live series, chart
dataset adapter) can be fitted without inheriting from our classes.

Design Principles:
    - Minimal contracts: three read-only accessors, nothing more
    - Never mutated: fitting only reads from a source
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Hashable, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class SeriesSource(Protocol):
    """
    Minimal capability contract for a collection of (x, y) series.
    
    The regression engine consumes data only through these three methods.
    It does not care whether the backing store is an in-memory table, a
    circular buffer of live observations, or anything else.
    
    Values may be NaN to mark a missing observation.
    """
    
    def item_count(self, series: Hashable) -> int:
        """Number of items in the given series (non-negative)."""
        ...
    
    def x_value(self, series: Hashable, item: int) -> float:
        """x-value of an item. May be NaN."""
        ...
    
    def y_value(self, series: Hashable, item: int) -> float:
        """y-value of an item. May be NaN."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    Each backend knows how to take a validated design and produce a
    parameter payload. Backends are stateless, which makes them safe to
    share between threads and easy to test and swap.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{model}'
        Examples: 'cpu_linear', 'cpu_power', 'cpu_polynomial'
        """
        ...
    
    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the fit.
        
        Args:
            design: Validated sample set
            
        Returns:
            Result envelope containing parameter payload and metadata
            
        Raises:
            InsufficientDataError: If the design has too few observations
        """
        ...
