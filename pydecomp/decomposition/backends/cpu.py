"""
CPU backends for matrix decompositions.

CPUHouseholderQRBackend and CPUCholeskyBackend are the reference
implementations: textbook Householder QR and the row-by-row Cholesky
recurrence on dense float64 arrays. The LAPACK backends delegate to
NumPy and exist for cross-checking.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.compute.linalg.householder import (
    embed_in_identity,
    householder_reflector,
)
from pydecomp.core.compute.linalg.predicates import (
    first_nonpositive_minor,
    is_symmetric,
    leading_principal_minors,
)
from pydecomp.core.compute.timing import Timer
from pydecomp.core.compute.tolerances import (
    CONDITION_WARNING_THRESHOLD,
    rank_tolerance,
)
from pydecomp.core.exceptions import NotPositiveDefiniteError
from pydecomp.core.result import Result
from pydecomp.decomposition.design import MatrixDesign
from pydecomp.decomposition.solution import CholeskyParams, QRParams


def _freeze(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Own a copy of the array backed by an immutable bytes buffer.

    NumPy refuses to set WRITEABLE on a view of a bytes object, so the
    flag cannot be switched back on by the caller.
    """
    owned = np.ascontiguousarray(array, dtype=np.float64)
    return np.frombuffer(owned.tobytes(), dtype=np.float64).reshape(owned.shape)


def _numerical_rank(R: NDArray[np.floating[Any]], shape: tuple[int, int]) -> int:
    """Count diagonal entries of R that are distinguishable from zero."""
    diag_R = np.abs(np.diag(R))
    if len(diag_R) == 0 or np.max(diag_R) == 0.0:
        return 0
    # Householder QR does not pivot, so compare against the largest
    # diagonal entry rather than the first.
    tol = rank_tolerance(shape, float(np.max(diag_R)))
    return int(np.sum(diag_R > tol))


def _rank_warnings(rank: int, k: int) -> list[str]:
    if rank < k:
        return [
            f"R is numerically rank-deficient: rank={rank}, expected={k}"
        ]
    return []


def _require_positive_definite(design: MatrixDesign) -> None:
    """
    Precondition for Cholesky: square, symmetric, positive definite.

    Raises:
        DimensionError: If the matrix is not square
        NotPositiveDefiniteError: If it is not symmetric positive definite
    """
    design.require_square()
    A = design.data

    if not is_symmetric(A):
        raise NotPositiveDefiniteError(
            "Matrix must be positive definite for Cholesky decomposition: "
            f"{design.name} is not symmetric "
            f"(max |A - Aᵀ| = {float(np.max(np.abs(A - A.T))):.3g})",
            matrix_name=design.name,
        )

    order = first_nonpositive_minor(A)
    if order is not None:
        minor = float(leading_principal_minors(A[:order, :order])[-1])
        raise NotPositiveDefiniteError(
            "Matrix must be positive definite for Cholesky decomposition: "
            f"leading principal minor of order {order} is {minor:.6g}",
            matrix_name=design.name,
            min_pivot=minor,
            pivot_index=order - 1,
        )


class CPUHouseholderQRBackend:
    """
    QR decomposition by successive Householder reflections.

    Implements the Backend protocol for MatrixDesign -> QRParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_householder_qr'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        """
        Factor A = QR.

        Algorithm:
            For i = 0 .. min(m - 1, n) - 1:
                1. Take the trailing submatrix HA[i:, i:]
                2. Build the reflector for its first column
                3. Embed it in I_m at offset (i, i) to get H
                4. Q <- Q H,  HA <- H HA
            R = HA[:k, :], Q = Q[:, :k], k = min(m, n)

        At most m - 1 reflections are formed, so for m <= n + 1 the last
        row is never reflected. That reflection would act on a 1x1 block,
        where uuᵀ = uᵀu gives I - [[2]] = [[-1]]: a sign flip of the last
        row of R and the last column of Q that leaves Q R unchanged. For
        m = n + 1 every column is already reduced, so nothing is lost;
        info['skipped_final'] marks the m <= n case where it is omitted.

        Args:
            design: Validated input matrix

        Returns:
            Result containing QRParams
        """
        timer = Timer()
        timer.start()

        m, n = design.shape
        HA = np.array(design.data, dtype=np.float64)
        Q = np.eye(m)

        num_reflections = min(m - 1, n)

        for i in range(num_reflections):
            with timer.section('householder'):
                inner = householder_reflector(HA[i:, i:])
                H = embed_in_identity(inner, m, i)

            with timer.section('update'):
                Q = Q @ H
                HA = H @ HA

        k = min(m, n)
        with timer.section('truncate'):
            # Entries below the diagonal are rounding residue of the
            # reflections; the factor is triangular by construction.
            R = np.triu(HA[:k, :])
            Q = Q[:, :k]
            rank = _numerical_rank(R, (m, n))

        timer.stop()

        return Result(
            params=QRParams(Q=_freeze(Q), R=_freeze(R), rank=rank),
            info={
                'method': 'householder',
                'shape': (m, n),
                'reflections': num_reflections,
                'skipped_final': m <= n,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_rank_warnings(rank, k)),
        )


class CPULapackQRBackend:
    """Reduced QR via LAPACK (numpy.linalg.qr), for cross-checking."""

    @property
    def name(self) -> str:
        return 'cpu_lapack_qr'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        timer = Timer()
        timer.start()

        m, n = design.shape
        with timer.section('qr'):
            Q, R = np.linalg.qr(design.data, mode='reduced')
            R = np.triu(R)
            rank = _numerical_rank(R, (m, n))

        timer.stop()

        return Result(
            params=QRParams(Q=_freeze(Q), R=_freeze(R), rank=rank),
            info={'method': 'lapack', 'shape': (m, n)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_rank_warnings(rank, min(m, n))),
        )


class CPUCholeskyBackend:
    """
    Cholesky decomposition by the row-by-row square-root recurrence.

    Implements the Backend protocol for MatrixDesign -> CholeskyParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_cholesky'

    def solve(self, design: MatrixDesign) -> Result[CholeskyParams]:
        """
        Factor A = L Lᵀ.

        Rows are filled in increasing order; row j needs only rows < j:

            s      = Σ_{x<i} L[j, x] L[i, x]
            L[j,j] = sqrt(A[j, j] - s)
            L[j,i] = (A[j, i] - s) / L[i, i]      for i < j

        Args:
            design: Validated input matrix

        Returns:
            Result containing CholeskyParams

        Raises:
            DimensionError: If A is not square
            NotPositiveDefiniteError: If A is not symmetric positive definite
        """
        timer = Timer()
        timer.start()

        with timer.section('validation'):
            _require_positive_definite(design)

        A = design.data
        m = design.m

        with timer.section('cholesky'):
            L = np.zeros((m, m))
            for j in range(m):
                for i in range(j + 1):
                    s = float(L[j, :i] @ L[i, :i])
                    if i == j:
                        radicand = A[j, j] - s
                        if radicand <= 0.0:
                            raise NotPositiveDefiniteError(
                                "Matrix must be positive definite for Cholesky "
                                f"decomposition: pivot {j} is {radicand:.6g}",
                                matrix_name=design.name,
                                min_pivot=float(radicand),
                                pivot_index=j,
                            )
                        L[j, j] = np.sqrt(radicand)
                    else:
                        L[j, i] = (A[j, i] - s) / L[i, i]

        with timer.section('transpose'):
            L = _freeze(L)
            LT = _freeze(L.T)

        timer.stop()

        return Result(
            params=CholeskyParams(L=L, LT=LT),
            info={'method': 'recurrence', 'shape': (m, m)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_conditioning_warnings(L)),
        )


class CPULapackCholeskyBackend:
    """Cholesky via LAPACK (numpy.linalg.cholesky), for cross-checking."""

    @property
    def name(self) -> str:
        return 'cpu_lapack_cholesky'

    def solve(self, design: MatrixDesign) -> Result[CholeskyParams]:
        timer = Timer()
        timer.start()

        with timer.section('validation'):
            _require_positive_definite(design)

        m = design.m
        with timer.section('cholesky'):
            try:
                L = np.linalg.cholesky(design.data)
            except np.linalg.LinAlgError as e:
                raise NotPositiveDefiniteError(
                    f"Matrix must be positive definite for Cholesky decomposition: {e}",
                    matrix_name=design.name,
                ) from e

        L = _freeze(np.tril(L))
        LT = _freeze(L.T)
        timer.stop()

        return Result(
            params=CholeskyParams(L=L, LT=LT),
            info={'method': 'lapack', 'shape': (m, m)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_conditioning_warnings(L)),
        )


def _conditioning_warnings(L: NDArray[np.floating[Any]]) -> list[str]:
    """
    Warn when A = L Lᵀ is badly conditioned.

    (max Lᵢᵢ / min Lᵢᵢ)² is a lower bound on the 2-norm condition of A.
    """
    diag = np.diag(L)
    estimate = float((diag.max() / diag.min()) ** 2)
    if estimate > CONDITION_WARNING_THRESHOLD:
        return [
            f"Matrix is badly conditioned (condition estimate {estimate:.3g}); "
            f"the factor may have lost precision"
        ]
    return []
