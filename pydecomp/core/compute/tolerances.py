"""
Tolerance tiers for numerical checks.

Defines the precision expectations used by the matrix predicates, the
rank and conditioning diagnostics, and the test suite:
- RECONSTRUCTION: Q @ R or L @ Lᵀ against the input, per element
- SYMMETRY: A against Aᵀ before a Cholesky factorization
- ORTHOGONALITY: Qᵀ @ Q against the identity
- TRIANGULAR: entries off the triangle of R or L
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


RECONSTRUCTION = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='reconstruction',
    description='Product of factors reproduces the input per element',
)

SYMMETRY = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='symmetry',
    description='A equals its transpose up to rounding in its construction',
)

ORTHOGONALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='orthogonality',
    description='Columns are orthonormal: QᵀQ = I',
)

TRIANGULAR = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='triangular',
    description='Entries off the triangle are exactly zero',
)

# Diagonal entries of R below max(m, n) * eps * max|diag(R)| count as zero
# when determining numerical rank.
RANK_TOLERANCE_FACTOR: float = float(np.finfo(np.float64).eps)

# Condition number estimate of A above which a Cholesky result carries
# a warning. Near 1/eps^(3/4) the factor loses most significant digits.
CONDITION_WARNING_THRESHOLD: float = 1e12


def rank_tolerance(shape: tuple[int, int], leading: float) -> float:
    """Absolute threshold below which a diagonal of R is treated as zero."""
    return max(shape) * RANK_TOLERANCE_FACTOR * abs(leading)
