"""
MatrixDesign: validated input for matrix decompositions.

Wraps a dense real matrix and provides validation and metadata for the
decomposition pipeline. The wrapped array is a private, read-only copy, so
no decomposition can ever modify caller-owned data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_nonempty,
    check_square,
)


@dataclass(frozen=True, eq=False)
class MatrixDesign:
    """
    Design for matrix decompositions.

    Wraps an m x n float64 matrix with m, n >= 1 and only finite entries.
    Immutable after construction.

    Construction:
        MatrixDesign.from_array(A)
        MatrixDesign.from_array(A, name='X')
    """
    _data: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'A') -> MatrixDesign:
        """
        Build MatrixDesign from array-like data.

        Parameters
        ----------
        data : array-like
            2D matrix: nested sequences, numpy array, or anything with a
            ``.values`` attribute (e.g. a pandas DataFrame).
        name : str
            Name used in error messages.

        Raises
        ------
        ValidationError
            Non-numeric, complex, NaN or Inf input.
        DimensionError
            Input is not 2D or has a zero-length dimension.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values

        array = check_array(data, name)
        check_2d(array, name)
        check_nonempty(array, name)
        check_finite(array, name)

        owned = np.ascontiguousarray(array, dtype=np.float64)
        frozen = np.frombuffer(owned.tobytes(), dtype=np.float64).reshape(owned.shape)
        return cls(_data=frozen, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only matrix (m x n)."""
        return self._data

    @property
    def name(self) -> str:
        """Name used in error messages."""
        return self._name

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.m, self.n)

    @property
    def is_square(self) -> bool:
        return self.m == self.n

    def require_square(self) -> None:
        """
        Raise DimensionError unless the matrix is square.
        """
        check_square(self._data, self._name)

    def __repr__(self) -> str:
        return f"MatrixDesign(name={self._name!r}, m={self.m}, n={self.n})"
