"""
Shared compute infrastructure for pycurvefit.

IMPORTANT: This is NOT where model backends live. Those go in
regression/backends/. This module contains shared utilities only.

Submodules:
    timing: Execution timing utilities
"""

from pycurvefit.core.compute.timing import Timer

__all__ = [
    "Timer",
]
