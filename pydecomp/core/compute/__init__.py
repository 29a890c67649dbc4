"""
Shared compute infrastructure for PyDecomp.

This module provides timing utilities, tolerance constants and the linear
algebra kernels shared by the decomposition backends.

Submodules:
    timing: Execution timing utilities
    tolerances: Named tolerance tiers
    linalg: Householder reflectors and matrix predicates
"""

from pydecomp.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
