"""
Tests for MatrixDesign.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pydecomp.core.exceptions import DimensionError, ValidationError
from pydecomp.decomposition import MatrixDesign


class FakeFrame:
    """Minimal stand-in for objects exposing .values, like a DataFrame."""

    def __init__(self, values):
        self.values = np.asarray(values)


class TestFromArray:

    def test_metadata(self):
        design = MatrixDesign.from_array([[1, 2, 3], [4, 5, 6]])
        assert design.shape == (2, 3)
        assert design.m == 2
        assert design.n == 3
        assert not design.is_square
        assert design.data.dtype == np.float64

    def test_owns_a_copy(self):
        A = np.eye(3)
        design = MatrixDesign.from_array(A)
        A[0, 0] = 99.0
        assert design.data[0, 0] == 1.0

    def test_data_read_only(self):
        design = MatrixDesign.from_array(np.eye(2))
        with pytest.raises(ValueError):
            design.data[0, 0] = 5.0

    def test_writeable_flag_cannot_be_restored(self):
        design = MatrixDesign.from_array(np.eye(2))
        with pytest.raises(ValueError):
            design.data.flags.writeable = True

    def test_frozen(self):
        design = MatrixDesign.from_array(np.eye(2))
        with pytest.raises(FrozenInstanceError):
            design._data = np.zeros((2, 2))

    def test_values_attribute(self):
        design = MatrixDesign.from_array(FakeFrame([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(design.data, [[1.0, 2.0], [3.0, 4.0]])

    def test_name_in_errors(self):
        with pytest.raises(ValidationError, match="X: contains non-finite"):
            MatrixDesign.from_array([[np.nan]], name='X')

    def test_repr(self):
        assert repr(MatrixDesign.from_array(np.eye(2))) == "MatrixDesign(name='A', m=2, n=2)"


class TestValidation:

    def test_vector_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            MatrixDesign.from_array([1.0, 2.0])

    def test_empty_rejected(self):
        with pytest.raises(DimensionError):
            MatrixDesign.from_array(np.zeros((3, 0)))

    def test_require_square(self):
        MatrixDesign.from_array(np.eye(3)).require_square()
        with pytest.raises(DimensionError, match="2x3"):
            MatrixDesign.from_array(np.ones((2, 3))).require_square()
