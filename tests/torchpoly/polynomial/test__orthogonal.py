"""Tests for Chebyshev and Legendre polynomial generators."""

import math

import numpy as np
import pytest
import torch

from torchpoly.polynomial import (
    OrthogonalPolynomialCache,
    chebyshev_nodes,
    chebyshev_polynomial_t,
    chebyshev_polynomial_u,
    legendre_polynomial_p,
    polynomial,
    polynomial_degree,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_has_roots,
)
from torchpoly.root_finding import Bound, Interval


class TestChebyshevPolynomialT:
    """Tests for chebyshev_polynomial_t."""

    @pytest.mark.parametrize(
        "n,coeffs",
        [
            (0, [1.0]),
            (1, [0.0, 1.0]),
            (2, [-1.0, 0.0, 2.0]),
            (3, [0.0, -3.0, 0.0, 4.0]),
            (4, [1.0, 0.0, -8.0, 0.0, 8.0]),
        ],
    )
    def test_low_orders(self, n, coeffs):
        """Explicit power-basis coefficients."""
        assert polynomial_equal(chebyshev_polynomial_t(n), polynomial(coeffs))

    @pytest.mark.parametrize("n", [5, 10, 17])
    def test_matches_numpy(self, n):
        """Matches numpy.polynomial.chebyshev.cheb2poly."""
        expected = np.polynomial.chebyshev.cheb2poly([0.0] * n + [1.0])
        torch.testing.assert_close(
            chebyshev_polynomial_t(n).coeffs, torch.from_numpy(expected)
        )

    @pytest.mark.parametrize("n", [1, 2, 5, 9])
    def test_cosine_identity(self, n):
        """T_n(cos(t)) = cos(n t)."""
        t = torch.linspace(0.0, math.pi, 17, dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_evaluate(chebyshev_polynomial_t(n), torch.cos(t)),
            torch.cos(n * t),
        )

    def test_negative_order_raises(self):
        """Negative order raises ValueError."""
        with pytest.raises(ValueError):
            chebyshev_polynomial_t(-1)

    def test_dtype(self):
        """Coefficient dtype is configurable."""
        assert chebyshev_polynomial_t(3, dtype=torch.float32).coeffs.dtype == (
            torch.float32
        )


class TestChebyshevPolynomialU:
    """Tests for chebyshev_polynomial_u."""

    def test_low_orders(self):
        """U_0 = 1, U_1 = 2x, U_2 = 4x^2 - 1, U_3 = 8x^3 - 4x."""
        assert polynomial_equal(chebyshev_polynomial_u(0), polynomial([1.0]))
        assert polynomial_equal(chebyshev_polynomial_u(1), polynomial([0.0, 2.0]))
        assert polynomial_equal(
            chebyshev_polynomial_u(2), polynomial([-1.0, 0.0, 4.0])
        )
        assert polynomial_equal(
            chebyshev_polynomial_u(3), polynomial([0.0, -4.0, 0.0, 8.0])
        )

    @pytest.mark.parametrize("n", [1, 4, 7])
    def test_sine_identity(self, n):
        """U_n(cos(t)) sin(t) = sin((n + 1) t)."""
        t = torch.linspace(0.1, 3.0, 13, dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_evaluate(chebyshev_polynomial_u(n), torch.cos(t))
            * torch.sin(t),
            torch.sin((n + 1) * t),
        )


class TestLegendrePolynomialP:
    """Tests for legendre_polynomial_p."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 6, 10])
    def test_matches_numpy(self, n):
        """Matches numpy.polynomial.legendre.leg2poly."""
        expected = np.polynomial.legendre.leg2poly([0.0] * n + [1.0])
        torch.testing.assert_close(
            legendre_polynomial_p(n).coeffs, torch.from_numpy(expected)
        )

    @pytest.mark.parametrize("n", [1, 4, 8])
    def test_unit_at_one(self, n):
        """P_n(1) = 1 and P_n(-1) = (-1)^n."""
        p = legendre_polynomial_p(n)
        assert abs(float(polynomial_evaluate(p, 1.0)) - 1.0) < 1e-12
        assert abs(float(polynomial_evaluate(p, -1.0)) - (-1.0) ** n) < 1e-12


class TestOrthogonalPolynomialCache:
    """Tests for OrthogonalPolynomialCache."""

    def test_lazily_filled(self):
        """All orders up to the requested one are cached."""
        cache = OrthogonalPolynomialCache()

        chebyshev_polynomial_t(10, cache=cache)

        assert len(cache.chebyshev_t) == 11
        assert len(cache.chebyshev_u) == 0
        assert len(cache.legendre_p) == 0
        assert polynomial_degree(cache.chebyshev_t[7]) == 7

    def test_reuses_entries(self):
        """Cached polynomials are returned on later calls."""
        cache = OrthogonalPolynomialCache()

        first = legendre_polynomial_p(5, cache=cache)
        second = legendre_polynomial_p(5, cache=cache)
        legendre_polynomial_p(3, cache=cache)

        assert first is second
        assert len(cache.legendre_p) == 6

    def test_clear(self):
        """clear() empties every table."""
        cache = OrthogonalPolynomialCache()
        chebyshev_polynomial_t(3, cache=cache)
        chebyshev_polynomial_u(3, cache=cache)
        legendre_polynomial_p(3, cache=cache)

        cache.clear()

        assert not cache.chebyshev_t
        assert not cache.chebyshev_u
        assert not cache.legendre_p

    def test_no_shared_state(self):
        """Without a cache nothing is shared between calls."""
        assert chebyshev_polynomial_t(4) is not chebyshev_polynomial_t(4)


class TestChebyshevNodes:
    """Tests for chebyshev_nodes."""

    @pytest.mark.parametrize("n", [1, 2, 5, 17])
    def test_roots_of_t_n(self, n):
        """The nodes are the roots of T_n."""
        nodes = chebyshev_nodes(n)
        assert nodes.shape == (n,)
        assert polynomial_has_roots(chebyshev_polynomial_t(n), nodes)

    def test_zero_nodes(self):
        """n = 0 gives an empty tensor."""
        assert chebyshev_nodes(0).shape == (0,)

    def test_mapped_to_interval(self):
        """Nodes are mapped affinely onto the interval."""
        interval = Interval(2.0, 6.0, Bound.CLOSED, Bound.CLOSED)

        nodes = chebyshev_nodes(4, interval)

        expected = 4.0 + 2.0 * chebyshev_nodes(4)
        torch.testing.assert_close(nodes, expected)
        assert all(interval.contains(x) for x in nodes)

    def test_negative_raises(self):
        """Negative n raises ValueError."""
        with pytest.raises(ValueError):
            chebyshev_nodes(-1)
