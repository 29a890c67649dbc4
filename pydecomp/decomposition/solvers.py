"""
Solver dispatch for matrix decompositions.

Provides qr() and cholesky() as the only way to obtain decomposition
objects, plus qr_solve() and cholesky_solve() for one-shot linear solves.
"""

from __future__ import annotations

from typing import Any, Literal
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import ValidationError
from pydecomp.core.result import Result
from pydecomp.decomposition.design import MatrixDesign
from pydecomp.decomposition.solution import CholeskyDecomposition, QRDecomposition
from pydecomp.decomposition.backends.cpu import (
    CPUCholeskyBackend,
    CPUHouseholderQRBackend,
    CPULapackCholeskyBackend,
    CPULapackQRBackend,
)


QRMethod = Literal['householder', 'lapack']
CholeskyMethod = Literal['recurrence', 'lapack']


def _ensure_design(data: ArrayLike | MatrixDesign) -> MatrixDesign:
    """Convert raw array to MatrixDesign if needed."""
    if isinstance(data, MatrixDesign):
        return data
    return MatrixDesign.from_array(data)


def _get_qr_backend(method: QRMethod):
    if method == 'householder':
        return CPUHouseholderQRBackend()
    if method == 'lapack':
        return CPULapackQRBackend()
    raise ValidationError(
        f"Unknown QR method: {method!r}. Must be 'householder' or 'lapack'."
    )


def _get_cholesky_backend(method: CholeskyMethod):
    if method == 'recurrence':
        return CPUCholeskyBackend()
    if method == 'lapack':
        return CPULapackCholeskyBackend()
    raise ValidationError(
        f"Unknown Cholesky method: {method!r}. Must be 'recurrence' or 'lapack'."
    )


def _emit_warnings(result: Result[Any]) -> None:
    # stacklevel=3 points at the caller of qr()/cholesky()
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)


def qr(
    A: ArrayLike | MatrixDesign,
    *,
    method: QRMethod = 'householder',
) -> QRDecomposition:
    """
    QR decomposition A = QR.

    Parameters
    ----------
    A : array-like or MatrixDesign
        m x n real matrix, m, n >= 1. Never modified.
    method : str
        'householder' (default) applies Householder reflections;
        'lapack' delegates to numpy.linalg.qr.

    Returns
    -------
    QRDecomposition with Q (m x k, orthonormal columns) and R (k x n,
    upper triangular), k = min(m, n).

    Raises
    ------
    ValidationError
        Non-numeric or non-finite input, or unknown method.
    DimensionError
        Input is not a non-empty 2D matrix.

    Warns
    -----
    RuntimeWarning
        If R is numerically rank-deficient.

    Examples
    --------
    >>> result = qr([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
    >>> np.allclose(result.Q @ result.R, [[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
    True
    """
    backend = _get_qr_backend(method)
    design = _ensure_design(A)
    result = backend.solve(design)
    _emit_warnings(result)
    return QRDecomposition(_result=result, _shape=design.shape)


def cholesky(
    A: ArrayLike | MatrixDesign,
    *,
    method: CholeskyMethod = 'recurrence',
) -> CholeskyDecomposition:
    """
    Cholesky decomposition A = L Lᵀ.

    Parameters
    ----------
    A : array-like or MatrixDesign
        m x m symmetric positive definite matrix. Never modified.
    method : str
        'recurrence' (default) fills L row by row; 'lapack' delegates
        to numpy.linalg.cholesky.

    Returns
    -------
    CholeskyDecomposition with L (lower triangular, positive diagonal)
    and LT (its transpose).

    Raises
    ------
    DimensionError
        A is not square.
    NotPositiveDefiniteError
        A is not symmetric positive definite.

    Warns
    -----
    RuntimeWarning
        If A is badly conditioned.
    """
    backend = _get_cholesky_backend(method)
    design = _ensure_design(A)
    result = backend.solve(design)
    _emit_warnings(result)
    return CholeskyDecomposition(_result=result, _shape=design.shape)


def qr_solve(
    A: ArrayLike | MatrixDesign,
    b: ArrayLike,
    *,
    check_rank: bool = True,
) -> NDArray[np.floating[Any]]:
    """
    Least squares via Householder QR.

    Solves min_x ||A x - b||₂ as x = R⁻¹ Qᵀ b.

    Parameters
    ----------
    A : array-like or MatrixDesign
        m x n matrix with m >= n.
    b : array-like
        Right-hand side, shape (m,) or (m, k).
    check_rank : bool
        If True, raise SingularMatrixError when A is rank-deficient.

    Returns
    -------
    Solution of shape (n,) or (n, k).
    """
    return qr(A).solve(b, check_rank=check_rank)


def cholesky_solve(
    A: ArrayLike | MatrixDesign,
    b: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b for symmetric positive definite A.

    Parameters
    ----------
    A : array-like or MatrixDesign
        m x m symmetric positive definite matrix.
    b : array-like
        Right-hand side, shape (m,) or (m, k).

    Returns
    -------
    Solution with the same shape as b.
    """
    return cholesky(A).solve(b)
