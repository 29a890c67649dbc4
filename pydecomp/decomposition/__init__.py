"""
Matrix decomposition module.

Dense QR (Householder reflections) and Cholesky (square-root recurrence)
factorizations with immutable, name-addressable results.

Public API:
    qr(A)                 - A = QR
    cholesky(A)           - A = L Lᵀ
    qr_solve(A, b)        - Least squares via QR
    cholesky_solve(A, b)  - SPD solve via Cholesky
"""

from pydecomp.decomposition.design import MatrixDesign
from pydecomp.decomposition.solution import (
    CholeskyDecomposition,
    CholeskyParams,
    QRDecomposition,
    QRParams,
)
from pydecomp.decomposition.solvers import (
    cholesky,
    cholesky_solve,
    qr,
    qr_solve,
)

__all__ = [
    "qr",
    "cholesky",
    "qr_solve",
    "cholesky_solve",
    "MatrixDesign",
    "QRParams",
    "QRDecomposition",
    "CholeskyParams",
    "CholeskyDecomposition",
]
