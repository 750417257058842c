"""Tests for polynomial exception hierarchy."""

import pytest

from torchpoly.polynomial import (
    DegreeError,
    PolynomialError,
    polynomial,
    polynomial_zero,
)


class TestExceptionHierarchy:
    """Test that all exceptions inherit from PolynomialError."""

    def test_degree_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise DegreeError("test")

    def test_polynomial_error_is_exception(self):
        assert issubclass(PolynomialError, Exception)


class TestExceptionMessages:
    """Test that raised exceptions carry useful messages."""

    def test_empty_coefficients_message(self):
        with pytest.raises(PolynomialError, match="at least one coefficient"):
            polynomial([])

    def test_division_by_zero_message(self):
        with pytest.raises(DegreeError, match="zero polynomial"):
            divmod(polynomial([1.0, 1.0]), polynomial_zero())
