"""Tests for the Euclidean and extended Euclidean algorithms."""

from collections import Counter

import hypothesis
import torch

from torchpoly.polynomial import (
    euclidean,
    extended_euclidean,
    polynomial,
    polynomial_add,
    polynomial_degree,
    polynomial_equal,
    polynomial_from_roots,
    polynomial_is_zero,
    polynomial_mod,
    polynomial_monomial,
    polynomial_multiply,
    polynomial_one,
    polynomial_zero,
)
from torchpoly.testing.strategies import integer_roots

X = polynomial_monomial(1)


class TestEuclidean:
    """Tests for euclidean (monic GCD)."""

    def test_greatest_common_divisor(self):
        """gcd(x^4 - 2x^3 - 6x^2 + 12x + 15, x^3 + x^2 - 4x - 4) = x + 1."""
        p = X**4 - 2 * X**3 - 6 * X**2 + 12 * X + 15
        q = X**3 + X**2 - 4 * X - 4

        assert polynomial_equal(euclidean(p, q), X + 1)

    def test_coprime(self):
        """Coprime polynomials have GCD 1."""
        p = polynomial_from_roots([1.0, 2.0])
        q = polynomial_from_roots([3.0, 4.0])

        assert polynomial_equal(euclidean(p, q), polynomial_one())

    def test_gcd_with_zero(self):
        """gcd(p, 0) is p made monic."""
        p = 3 * polynomial_from_roots([1.0, -2.0])

        assert polynomial_equal(
            euclidean(p, polynomial_zero()), polynomial_from_roots([1.0, -2.0])
        )

    def test_gcd_of_zeros(self):
        """gcd(0, 0) is the zero polynomial."""
        assert polynomial_is_zero(euclidean(polynomial_zero(), polynomial_zero()))

    def test_non_integer_coefficients(self):
        """Floating-point path for non-integer coefficients."""
        p = polynomial_from_roots([0.5, 1.25, -2.5])
        q = polynomial_from_roots([0.5, 3.75])

        assert polynomial_equal(euclidean(p, q), X - 0.5)

    def test_repeated_common_factor(self):
        """Repeated common roots appear in the GCD with multiplicity."""
        p = polynomial_from_roots([2.0, 2.0, 2.0, -1.0])
        q = polynomial_from_roots([2.0, 2.0, 5.0])

        assert polynomial_equal(euclidean(p, q), (X - 2) ** 2)

    @hypothesis.given(
        a=integer_roots(max_size=4),
        b=integer_roots(max_size=4),
    )
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_gcd_of_root_products(self, a, b):
        """The GCD has exactly the common roots, with multiplicity."""
        common = sorted((Counter(a) & Counter(b)).elements())

        g = euclidean(polynomial_from_roots(a), polynomial_from_roots(b))

        assert polynomial_equal(g, polynomial_from_roots(common))


class TestExtendedEuclidean:
    """Tests for extended_euclidean (Bezout coefficients)."""

    def test_extended_euclidean(self):
        """Bezout coefficients of a textbook pair."""
        p = X**4 - 2 * X**3 - 6 * X**2 + 12 * X + 15
        q = X**3 + X**2 - 4 * X - 4

        s, t, g = extended_euclidean(p, q)

        assert polynomial_equal(g, 5 * (X + 1))
        assert polynomial_equal(s, -X + 3)
        assert polynomial_equal(t, X**2 - 6 * X + 10)
        assert polynomial_equal(s * p + t * q, g)

    def test_second_argument_zero(self):
        """extended_euclidean(p, 0) = (1, 0, p)."""
        p = polynomial([1.0, 2.0, 3.0])

        s, t, g = extended_euclidean(p, polynomial_zero())

        assert polynomial_equal(s, polynomial_one())
        assert polynomial_is_zero(t)
        assert polynomial_equal(g, p)

    @hypothesis.given(
        a=integer_roots(min_value=-3, max_value=3, max_size=3),
        b=integer_roots(min_value=-3, max_value=3, max_size=3),
    )
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_bezout_identity(self, a, b):
        """s * p + t * q == g and g divides p and q."""
        p = polynomial_from_roots(a)
        q = polynomial_from_roots(b)

        s, t, g = extended_euclidean(p, q)

        sp = polynomial_multiply(s, p)
        tq = polynomial_multiply(t, q)
        scale = max(
            1.0,
            float(sp.coeffs.abs().max()),
            float(tq.coeffs.abs().max()),
        )
        assert polynomial_equal(polynomial_add(sp, tq), g, tol=1e-8 * scale)

        for f in (p, q):
            remainder = polynomial_mod(f, g)
            assert polynomial_is_zero(remainder) or bool(
                torch.all(
                    remainder.coeffs.abs() < 1e-6 * f.coeffs.abs().max()
                )
            )

        assert polynomial_degree(g) == sum((Counter(a) & Counter(b)).values())
