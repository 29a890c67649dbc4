"""
Linear algebra kernels for PyDecomp.

All functions follow these conventions:
    - Inputs and outputs are NumPy float64 arrays
    - Inputs are never modified
    - Errors are raised immediately with clear messages

Submodules:
    householder: Householder reflector construction and embedding
    predicates: Symmetry, positive-definiteness, triangular and
                orthogonality checks
"""

from pydecomp.core.compute.linalg.householder import (
    embed_in_identity,
    householder_reflector,
    householder_vector,
)
from pydecomp.core.compute.linalg.predicates import (
    first_nonpositive_minor,
    is_lower_triangular,
    is_orthogonal,
    is_positive_definite,
    is_symmetric,
    is_upper_triangular,
    leading_principal_minors,
)

__all__ = [
    # Householder
    "embed_in_identity",
    "householder_reflector",
    "householder_vector",
    # Predicates
    "first_nonpositive_minor",
    "is_lower_triangular",
    "is_orthogonal",
    "is_positive_definite",
    "is_symmetric",
    "is_upper_triangular",
    "leading_principal_minors",
]
