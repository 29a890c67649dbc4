"""
Exception hierarchy for PyDecomp.

All exceptions inherit from PyDecompError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDecompError(Exception):
    """Base exception for all PyDecomp errors."""
    pass


class ValidationError(PyDecompError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when a
    square matrix is required, or when a submatrix does not fit at the
    requested offset.
    """
    pass


class NumericalError(PyDecompError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a solve requires full column rank but the factor R is
    numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(m, n))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when Cholesky decomposition is requested for a matrix that is
    not symmetric positive definite, either by the precondition check or
    by a non-positive pivot during the recurrence.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_pivot: Smallest leading principal minor or failing pivot, if known
        pivot_index: Row at which the recurrence failed, if applicable
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_pivot: float | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_pivot = min_pivot
        self.pivot_index = pivot_index


class InvalidComponentError(PyDecompError, LookupError):
    """
    A decomposition result was asked for a component it does not have.

    Attributes:
        name: The requested component name
        available: Names the result does provide
    """

    def __init__(
        self,
        message: str,
        name: object = None,
        available: tuple[str, ...] = ()
    ):
        super().__init__(message)
        self.name = name
        self.available = available


class ImmutableResultError(PyDecompError, TypeError):
    """
    Attempted to set or delete a component of a decomposition result.

    Decomposition results are read-only once constructed; this is
    raised unconditionally by every mutation path.
    """
    pass
