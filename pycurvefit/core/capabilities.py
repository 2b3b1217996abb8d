"""
Capability string constants for pycurvefit.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pycurvefit.core.capabilities import CAPABILITY_MATERIALIZED
    
    if source.supports(CAPABILITY_MATERIALIZED):
        x, y = source.series_arrays(0)
"""

# Series can be returned as full numpy arrays in memory
CAPABILITY_MATERIALIZED = 'materialized'

# Series may contain NaN markers for missing observations
CAPABILITY_MISSING_VALUES = 'missing_values'

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_MISSING_VALUES',
]
