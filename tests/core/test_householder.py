"""
Tests for Householder reflector construction.

Validates:
    - H is symmetric and orthogonal
    - H x is zero below its first entry and equals ∓‖x‖ on top
    - Sign convention, including x₁ = 0
    - Degenerate inputs: zero column, 1x1
    - embed_in_identity placement and bounds
"""

import numpy as np
import pytest

from pydecomp.core.compute.linalg.householder import (
    embed_in_identity,
    householder_reflector,
    householder_vector,
)
from pydecomp.core.exceptions import DimensionError


# ═══════════════════════════════════════════════════════════════════════
# Reflector properties
# ═══════════════════════════════════════════════════════════════════════


class TestReflectorProperties:

    @pytest.mark.parametrize("p", [1, 2, 3, 7])
    def test_symmetric_and_orthogonal(self, rng, p):
        x = rng.standard_normal(p)
        H = householder_reflector(x)
        assert H.shape == (p, p)
        np.testing.assert_allclose(H, H.T, atol=1e-14)
        np.testing.assert_allclose(H @ H.T, np.eye(p), atol=1e-12)

    @pytest.mark.parametrize("p", [2, 3, 7])
    def test_zeroes_below_first_entry(self, rng, p):
        x = rng.standard_normal(p)
        Hx = householder_reflector(x) @ x
        np.testing.assert_allclose(Hx[1:], 0.0, atol=1e-12)
        assert abs(Hx[0]) == pytest.approx(np.linalg.norm(x))

    def test_positive_leading_entry_maps_to_negative_norm(self):
        H = householder_reflector([3.0, 4.0])
        np.testing.assert_allclose(H @ np.array([3.0, 4.0]), [-5.0, 0.0], atol=1e-12)

    def test_negative_leading_entry_maps_to_positive_norm(self):
        H = householder_reflector([-3.0, 4.0])
        np.testing.assert_allclose(H @ np.array([-3.0, 4.0]), [5.0, 0.0], atol=1e-12)

    def test_zero_leading_entry_uses_positive_sign(self):
        u, alpha = householder_vector([0.0, 3.0, 4.0])
        assert alpha == pytest.approx(-5.0)
        np.testing.assert_allclose(u, [5.0, 3.0, 4.0])

    def test_matrix_input_uses_first_column(self):
        block = np.array([[3.0, 100.0], [4.0, -7.0]])
        np.testing.assert_allclose(
            householder_reflector(block), householder_reflector([3.0, 4.0])
        )

    def test_input_not_modified(self):
        x = np.array([1.0, 2.0, 2.0])
        householder_reflector(x)
        np.testing.assert_array_equal(x, [1.0, 2.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Degenerate inputs
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerateInputs:

    def test_one_by_one_is_minus_one(self):
        """uuᵀ = uᵀu for a 1-vector, so I - 2uuᵀ/uᵀu = [[-1]]."""
        np.testing.assert_array_equal(householder_reflector([5.0]), [[-1.0]])
        np.testing.assert_array_equal(householder_reflector([-2.5]), [[-1.0]])

    def test_zero_column_is_identity(self):
        np.testing.assert_array_equal(householder_reflector(np.zeros(4)), np.eye(4))

    def test_already_reduced_column_flips_sign(self):
        H = householder_reflector([2.0, 0.0, 0.0])
        np.testing.assert_allclose(H @ np.array([2.0, 0.0, 0.0]), [-2.0, 0.0, 0.0])

    def test_empty_vector_rejected(self):
        with pytest.raises(DimensionError, match="empty"):
            householder_reflector(np.zeros(0))

    def test_matrix_without_columns_rejected(self):
        with pytest.raises(DimensionError):
            householder_reflector(np.zeros((3, 0)))

    def test_three_dimensional_rejected(self):
        with pytest.raises(DimensionError):
            householder_reflector(np.zeros((2, 2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# embed_in_identity
# ═══════════════════════════════════════════════════════════════════════


class TestEmbedInIdentity:

    def test_leading_block_untouched(self):
        block = np.array([[0.0, 1.0], [1.0, 0.0]])
        H = embed_in_identity(block, 4, 2)
        expected = np.array([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
        ])
        np.testing.assert_array_equal(H, expected)

    def test_does_not_fit(self):
        with pytest.raises(DimensionError, match="does not fit"):
            embed_in_identity(np.eye(3), 4, 2)

    def test_negative_offset(self):
        with pytest.raises(DimensionError):
            embed_in_identity(np.eye(2), 4, -1)

    def test_non_square_block(self):
        with pytest.raises(DimensionError, match="square"):
            embed_in_identity(np.ones((2, 3)), 4, 0)
