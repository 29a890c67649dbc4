"""
Core infrastructure for PyDecomp.

This module provides shared abstractions, utilities, and compute kernels
used by the decomposition domain.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, Householder reflectors, matrix predicates
"""

from pydecomp.core.protocols import Backend
from pydecomp.core.result import Result
from pydecomp.core.exceptions import (
    PyDecompError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    InvalidComponentError,
    ImmutableResultError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDecompError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "InvalidComponentError",
    "ImmutableResultError",
]
