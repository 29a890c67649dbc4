"""
Decomposition solution types.

Contains the parameter payloads produced by the backends and the
user-facing, read-only decomposition objects wrapping them.

A decomposition object is only ever built by qr() or cholesky(). It exposes
its factors as properties (``result.Q``) and by name (``result["Q"]``);
every mutation path fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import solve_triangular

from pydecomp.core.exceptions import (
    DimensionError,
    ImmutableResultError,
    InvalidComponentError,
    SingularMatrixError,
)
from pydecomp.core.result import Result
from pydecomp.core.validation import check_array, check_finite


@dataclass(frozen=True, eq=False)
class QRParams:
    """
    Parameter payload for QR decomposition.

    Q is m x k with orthonormal columns and R is k x n upper triangular,
    k = min(m, n). rank is the numerical rank read off the diagonal of R.
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True, eq=False)
class CholeskyParams:
    """
    Parameter payload for Cholesky decomposition.

    L is m x m lower triangular with a positive diagonal; LT is its
    transpose, computed once by the backend.
    """
    L: NDArray[np.floating[Any]]
    LT: NDArray[np.floating[Any]]


class _ComponentAccess:
    """
    Mapping-style read-only access to the named factors of a decomposition.

    Subclasses declare ``_COMPONENTS``: accepted name -> property name.
    The first name for each property is its canonical spelling.
    """
    _COMPONENTS: ClassVar[dict[str, str]] = {}

    @property
    def components(self) -> tuple[str, ...]:
        """Canonical component names, in declaration order."""
        return tuple(dict.fromkeys(self._COMPONENTS.values()))

    def component(self, name: str) -> NDArray[np.floating[Any]]:
        """
        Look up a factor by name.

        Raises:
            InvalidComponentError: If the name is not a component
        """
        try:
            prop = self._COMPONENTS[name]
        except (KeyError, TypeError):
            raise InvalidComponentError(
                f"{type(self).__name__} does not have a gettable component: {name!r}. "
                f"Available: {', '.join(self.components)}",
                name=name,
                available=self.components,
            ) from None
        return getattr(self, prop)

    def __getitem__(self, name: str) -> NDArray[np.floating[Any]]:
        return self.component(name)

    def __setitem__(self, name: str, value: object) -> None:
        raise ImmutableResultError(
            f"{type(self).__name__} does not allow setting components (tried {name!r})"
        )

    def __delitem__(self, name: str) -> None:
        raise ImmutableResultError(
            f"{type(self).__name__} does not allow deleting components (tried {name!r})"
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._COMPONENTS

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)


def _check_rhs(b: ArrayLike, m: int) -> NDArray[np.floating[Any]]:
    """Validate a right-hand side with m rows."""
    rhs = check_array(b, 'b')
    check_finite(rhs, 'b')
    if rhs.ndim not in (1, 2):
        raise DimensionError(
            f"b: expected 1D or 2D array, got {rhs.ndim}D with shape {rhs.shape}"
        )
    if rhs.shape[0] != m:
        raise DimensionError(
            f"b: has {rhs.shape[0]} rows but the factored matrix has {m}"
        )
    return rhs


@dataclass(frozen=True, eq=False)
class QRDecomposition(_ComponentAccess):
    """
    QR decomposition A = QR computed with Householder reflections.

    Q: m x k orthonormal columns, R: k x n upper triangular, k = min(m, n).
    Obtain instances from qr(); the fields are private.
    """
    _result: Result[QRParams]
    _shape: tuple[int, int]

    _COMPONENTS: ClassVar[dict[str, str]] = {'Q': 'Q', 'R': 'R'}

    @property
    def Q(self) -> NDArray[np.floating[Any]]:
        """Orthogonal factor, shape (m, min(m, n))."""
        return self._result.params.Q

    @property
    def R(self) -> NDArray[np.floating[Any]]:
        """Upper triangular factor, shape (min(m, n), n)."""
        return self._result.params.R

    @property
    def rank(self) -> int:
        """Numerical rank of A, from the diagonal of R."""
        return self._result.params.rank

    @property
    def shape(self) -> tuple[int, int]:
        """Shape (m, n) of the factored matrix."""
        return self._shape

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._shape)

    def solve(self, b: ArrayLike, *, check_rank: bool = True) -> NDArray[np.floating[Any]]:
        """
        Least-squares solution of A x ≈ b.

        Computes x = R⁻¹ Qᵀ b by back substitution, which minimizes
        ||A x - b||₂ when A has full column rank.

        Args:
            b: Right-hand side, shape (m,) or (m, k)
            check_rank: If True, raise SingularMatrixError on rank-deficient A

        Returns:
            Solution, shape (n,) or (n, k)

        Raises:
            DimensionError: If A has fewer rows than columns, or b has the
                wrong number of rows
            SingularMatrixError: If A is rank-deficient and check_rank=True
        """
        m, n = self._shape
        if m < n:
            raise DimensionError(
                f"A: least squares needs at least as many rows as columns, got {m}x{n}"
            )
        rhs = _check_rhs(b, m)

        if check_rank and self.rank < n:
            raise SingularMatrixError(
                f"Matrix is rank-deficient: rank={self.rank}, expected={n}. "
                f"The least-squares solution is not unique.",
                matrix_name='A',
                rank=self.rank,
                expected_rank=n,
            )

        Qtb = self.Q.T @ rhs
        return solve_triangular(self.R[:n, :n], Qtb[:n], lower=False)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Human-readable description of the factorization."""
        m, n = self._shape
        lines = [
            "QR Decomposition",
            "=" * 60,
            f"Matrix: {m}x{n}",
            f"Q: {self.Q.shape[0]}x{self.Q.shape[1]}    R: {self.R.shape[0]}x{self.R.shape[1]}",
            f"Rank: {self.rank}",
            f"Method: {self.info.get('method', 'unknown')}",
        ]
        if 'reflections' in self.info:
            skipped = " (final reflection skipped)" if self.info.get('skipped_final') else ""
            lines.append(f"Reflections: {self.info['reflections']}{skipped}")
        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._shape
        return f"QRDecomposition(m={m}, n={n}, rank={self.rank})"


@dataclass(frozen=True, eq=False)
class CholeskyDecomposition(_ComponentAccess):
    """
    Cholesky decomposition A = L Lᵀ of a symmetric positive definite matrix.

    L: m x m lower triangular with positive diagonal. The transpose is
    available as ``LT``; in Python source ``result.Lᵀ`` normalizes to the
    same name, and ``result["Lᵀ"]`` is accepted as a key.
    Obtain instances from cholesky(); the fields are private.
    """
    _result: Result[CholeskyParams]
    _shape: tuple[int, int]

    _COMPONENTS: ClassVar[dict[str, str]] = {'L': 'L', 'LT': 'LT', 'Lᵀ': 'LT'}

    @property
    def L(self) -> NDArray[np.floating[Any]]:
        """Lower triangular factor, shape (m, m)."""
        return self._result.params.L

    @property
    def LT(self) -> NDArray[np.floating[Any]]:
        """Transpose of L, upper triangular, shape (m, m)."""
        return self._result.params.LT

    @property
    def shape(self) -> tuple[int, int]:
        return self._shape

    @property
    def log_determinant(self) -> float:
        """log det(A) = 2 Σ log Lᵢᵢ."""
        return float(2.0 * np.sum(np.log(np.diag(self.L))))

    @property
    def determinant(self) -> float:
        return float(np.prod(np.diag(self.L)) ** 2)

    def solve(self, b: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A x = b using the factorization.

        Two triangular solves: L z = b, then Lᵀ x = z.

        Args:
            b: Right-hand side, shape (m,) or (m, k)

        Returns:
            Solution, same shape as b

        Raises:
            DimensionError: If b has the wrong number of rows
        """
        rhs = _check_rhs(b, self._shape[0])
        z = solve_triangular(self.L, rhs, lower=True)
        return solve_triangular(self.LT, z, lower=False)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Human-readable description of the factorization."""
        m = self._shape[0]
        diag = np.diag(self.L)
        lines = [
            "Cholesky Decomposition",
            "=" * 60,
            f"Matrix: {m}x{m}",
            f"Method: {self.info.get('method', 'unknown')}",
            f"Diagonal of L: min={diag.min():.6g}, max={diag.max():.6g}",
            f"log det(A): {self.log_determinant:.6f}",
            "-" * 60,
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CholeskyDecomposition(m={self._shape[0]})"
