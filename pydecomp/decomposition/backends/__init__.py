"""
Decomposition backends.

All backends take a MatrixDesign and return Result[QRParams] or
Result[CholeskyParams].
"""

from pydecomp.decomposition.backends.cpu import (
    CPUCholeskyBackend,
    CPUHouseholderQRBackend,
    CPULapackCholeskyBackend,
    CPULapackQRBackend,
)

__all__ = [
    "CPUCholeskyBackend",
    "CPUHouseholderQRBackend",
    "CPULapackCholeskyBackend",
    "CPULapackQRBackend",
]
