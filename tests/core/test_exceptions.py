"""
Tests for PyDecomp exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDecompError)
    - Diagnostic attributes on SingularMatrixError, NotPositiveDefiniteError,
      InvalidComponentError
    - Builtin bases (LookupError, TypeError) for access errors
    - Default attribute values (None for optional attributes)
"""

import pytest

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


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDecompError."""

    def test_validation_error_is_pydecomp_error(self):
        with pytest.raises(PyDecompError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_not_positive_definite_is_not_validation_error(self):
        err = NotPositiveDefiniteError("not PD")
        assert not isinstance(err, ValidationError)

    def test_invalid_component_is_lookup_error(self):
        with pytest.raises(LookupError):
            raise InvalidComponentError("no such component")

    def test_invalid_component_is_pydecomp_error(self):
        with pytest.raises(PyDecompError):
            raise InvalidComponentError("no such component")

    def test_immutable_result_is_type_error(self):
        with pytest.raises(TypeError):
            raise ImmutableResultError("read-only")

    def test_immutable_result_is_pydecomp_error(self):
        with pytest.raises(PyDecompError):
            raise ImmutableResultError("read-only")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_attributes(self):
        err = SingularMatrixError(
            "rank-deficient", matrix_name="A", rank=2, expected_rank=3
        )
        assert str(err) == "rank-deficient"
        assert err.matrix_name == "A"
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults_none(self):
        err = SingularMatrixError("rank-deficient")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None


class TestNotPositiveDefiniteError:

    def test_attributes(self):
        err = NotPositiveDefiniteError(
            "not PD", matrix_name="A", min_pivot=-3.0, pivot_index=1
        )
        assert err.matrix_name == "A"
        assert err.min_pivot == -3.0
        assert err.pivot_index == 1

    def test_defaults_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None
        assert err.min_pivot is None
        assert err.pivot_index is None


class TestInvalidComponentError:

    def test_attributes(self):
        err = InvalidComponentError("no Z", name="Z", available=("Q", "R"))
        assert err.name == "Z"
        assert err.available == ("Q", "R")

    def test_message_not_quoted(self):
        """LookupError base must not add KeyError-style quoting."""
        err = InvalidComponentError("no such component")
        assert str(err) == "no such component"
