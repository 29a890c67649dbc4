"""
Structural predicates on dense matrices.

NumPy has no positive-definiteness test, so the Cholesky precondition is
implemented here together with the triangular and orthogonality checks the
decompositions promise. All predicates return plain bools and never raise
on non-square input; they answer False instead.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydecomp.core.compute.tolerances import (
    ORTHOGONALITY,
    SYMMETRY,
    TRIANGULAR,
    ToleranceTier,
)


def _is_square(A: NDArray[np.floating[Any]]) -> bool:
    return A.ndim == 2 and A.shape[0] == A.shape[1]


def is_symmetric(
    A: NDArray[np.floating[Any]],
    tolerance: ToleranceTier = SYMMETRY,
) -> bool:
    """True if A is square and equals its transpose within tolerance."""
    A = np.asarray(A, dtype=np.float64)
    if not _is_square(A):
        return False
    return bool(np.allclose(A, A.T, rtol=tolerance.rtol, atol=tolerance.atol))


def leading_principal_minors(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Determinants of the leading k x k submatrices, k = 1..m.

    Args:
        A: Square matrix

    Returns:
        Array of length m with det(A[:k, :k]) at index k - 1
    """
    A = np.asarray(A, dtype=np.float64)
    m = A.shape[0]
    return np.array([np.linalg.det(A[:k, :k]) for k in range(1, m + 1)])


def first_nonpositive_minor(A: NDArray[np.floating[Any]]) -> int | None:
    """
    Order of the first leading principal minor that is not positive.

    Signs come from slogdet, so minors that would under- or overflow as
    plain determinants are still classified correctly.

    Returns:
        k such that det(A[:k, :k]) <= 0, or None if every minor is positive
    """
    A = np.asarray(A, dtype=np.float64)
    for k in range(1, A.shape[0] + 1):
        sign, _ = np.linalg.slogdet(A[:k, :k])
        if sign <= 0.0:
            return k
    return None


def is_positive_definite(
    A: NDArray[np.floating[Any]],
    tolerance: ToleranceTier = SYMMETRY,
) -> bool:
    """
    True if A is symmetric and every leading principal minor is positive.

    Sylvester's criterion: a symmetric matrix is positive definite iff all
    of its leading principal minors are strictly positive.
    """
    A = np.asarray(A, dtype=np.float64)
    if not is_symmetric(A, tolerance):
        return False
    return first_nonpositive_minor(A) is None


def is_upper_triangular(
    A: NDArray[np.floating[Any]],
    atol: float = TRIANGULAR.atol,
) -> bool:
    """True if every entry strictly below the main diagonal is within atol of 0."""
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2:
        return False
    return bool(np.all(np.abs(np.tril(A, k=-1)) <= atol))


def is_lower_triangular(
    A: NDArray[np.floating[Any]],
    atol: float = TRIANGULAR.atol,
) -> bool:
    """True if every entry strictly above the main diagonal is within atol of 0."""
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2:
        return False
    return bool(np.all(np.abs(np.triu(A, k=1)) <= atol))


def is_orthogonal(
    Q: NDArray[np.floating[Any]],
    tolerance: ToleranceTier = ORTHOGONALITY,
) -> bool:
    """
    True if the columns of Q are orthonormal (QᵀQ = I).

    For square Q this is ordinary orthogonality; for a tall m x k Q it is
    the reduced-QR guarantee.
    """
    Q = np.asarray(Q, dtype=np.float64)
    if Q.ndim != 2 or Q.shape[0] < Q.shape[1]:
        return False
    k = Q.shape[1]
    return bool(np.allclose(Q.T @ Q, np.eye(k), rtol=tolerance.rtol, atol=tolerance.atol))
