"""
Householder reflectors.

A Householder reflector for a vector v is the orthogonal matrix

    H = I - 2 u uᵀ / (uᵀu),    u = v - α e₁,    α = -sign(v₁) ‖v‖

which maps v onto α e₁, zeroing every entry after the first. H is
symmetric and orthogonal (Hᵀ = H = H⁻¹). The sign of α is chosen opposite
to v₁ so that forming u never subtracts two numbers of similar size;
sign(0) is taken as +1.

Used by the Householder QR backend, one reflector per column.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.exceptions import DimensionError


def householder_vector(x: ArrayLike) -> tuple[NDArray[np.floating[Any]], float]:
    """
    Reflection vector u and target value α for a column.

    Args:
        x: 1D vector, or 2D matrix whose first column is reflected

    Returns:
        (u, α) with H x = α e₁ for H = I - 2 u uᵀ / (uᵀu).
        u is all zeros when x is all zeros.

    Raises:
        DimensionError: If x is empty or has more than two dimensions
    """
    v = np.asarray(x, dtype=np.float64)
    if v.ndim == 2:
        if v.shape[1] == 0:
            raise DimensionError(
                f"x: cannot reflect the first column of a matrix with shape {v.shape}"
            )
        v = v[:, 0]
    if v.ndim != 1:
        raise DimensionError(
            f"x: expected a vector or a matrix, got {v.ndim}D with shape {v.shape}"
        )
    if v.shape[0] == 0:
        raise DimensionError("x: cannot build a reflector for an empty vector")

    sign = 1.0 if v[0] >= 0.0 else -1.0
    alpha = -sign * float(np.linalg.norm(v))

    u = v.copy()
    u[0] -= alpha
    return u, alpha


def householder_reflector(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Orthogonal reflector that zeroes all but the first entry of a column.

    Args:
        x: 1D vector of length p, or 2D matrix with p rows whose first
           column is reflected

    Returns:
        p x p symmetric orthogonal matrix H. H @ x[:, 0] is zero below its
        first entry. A zero column yields the identity; a nonzero 1x1
        input yields [[-1]].

    Raises:
        DimensionError: If x is empty

    Example:
        >>> H = householder_reflector([3.0, 4.0])
        >>> np.round(H @ np.array([3.0, 4.0]), 12)
        array([-5.,  0.])
    """
    u, _ = householder_vector(x)
    p = u.shape[0]

    uu = float(u @ u)
    if uu == 0.0:
        return np.eye(p)

    return np.eye(p) - (2.0 / uu) * np.outer(u, u)


def embed_in_identity(
    block: NDArray[np.floating[Any]],
    size: int,
    offset: int,
) -> NDArray[np.floating[Any]]:
    """
    Place a square block on the diagonal of a size x size identity.

    The leading ``offset`` rows and columns stay untouched identity, so a
    reflector built for a trailing submatrix acts only on those rows.

    Raises:
        DimensionError: If the block is not square or does not fit
    """
    p, q = block.shape
    if p != q:
        raise DimensionError(f"block: expected a square matrix, got {p}x{q}")
    if offset < 0 or offset + p > size:
        raise DimensionError(
            f"block: {p}x{p} does not fit in a {size}x{size} matrix at offset "
            f"({offset}, {offset})"
        )

    H = np.eye(size)
    H[offset:offset + p, offset:offset + p] = block
    return H
