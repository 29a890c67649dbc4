"""
PyDecomp: dense matrix decompositions for statistical computing.

Textbook-accurate QR (Householder) and Cholesky factorizations on NumPy
arrays, used as building blocks for least squares, PCA and similar
routines.

Submodules:
    core: Exceptions, result envelope, validation, compute kernels
    decomposition: qr, cholesky and the solves built on them
"""

__version__ = "0.1.0"

from pydecomp.core.compute.linalg import (
    householder_reflector,
    is_lower_triangular,
    is_orthogonal,
    is_positive_definite,
    is_symmetric,
    is_upper_triangular,
)
from pydecomp.core.exceptions import (
    DimensionError,
    ImmutableResultError,
    InvalidComponentError,
    NotPositiveDefiniteError,
    NumericalError,
    PyDecompError,
    SingularMatrixError,
    ValidationError,
)
from pydecomp.decomposition import (
    CholeskyDecomposition,
    QRDecomposition,
    cholesky,
    cholesky_solve,
    qr,
    qr_solve,
)

__all__ = [
    "__version__",
    # Decompositions
    "qr",
    "cholesky",
    "qr_solve",
    "cholesky_solve",
    "QRDecomposition",
    "CholeskyDecomposition",
    # Kernels
    "householder_reflector",
    "is_lower_triangular",
    "is_orthogonal",
    "is_positive_definite",
    "is_symmetric",
    "is_upper_triangular",
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
