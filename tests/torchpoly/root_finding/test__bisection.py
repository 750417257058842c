# tests/torchpoly/root_finding/test__bisection.py
import math

import pytest
import torch

from torchpoly.polynomial import polynomial, polynomial_from_roots
from torchpoly.root_finding import Bound, BracketError, Interval, bisection


class TestBisection:
    """Tests for the bisection method."""

    def test_simple_quadratic(self):
        """Find sqrt(2) by solving x^2 - 2 = 0."""
        f = lambda x: x**2 - 2

        root = bisection(f, Interval(1.0, 2.0))

        assert root.dim() == 0
        torch.testing.assert_close(
            root, torch.tensor(math.sqrt(2), dtype=torch.float64)
        )

    def test_polynomial_callable(self):
        """Polynomials are callables."""
        p = polynomial_from_roots([-1.5, 0.25, 3.0])

        root = bisection(p, Interval(0.0, 1.0))

        assert abs(float(root) - 0.25) < 1e-8

    def test_endpoint_root(self):
        """A root at an included endpoint is returned directly."""
        p = polynomial([-1.0, 1.0])  # x - 1
        closed = (Bound.CLOSED, Bound.CLOSED)

        assert float(bisection(p, Interval(1.0, 3.0, *closed))) == 1.0
        assert float(bisection(p, Interval(-2.0, 1.0))) == 1.0

    def test_excluded_endpoint_root(self):
        """A root at an open endpoint is not returned."""
        p = polynomial_from_roots([-0.3, 0.0, 0.5])

        assert bisection(p, Interval(0.0, 1.0)) is None
        assert float(bisection(p, Interval(0.0, 1.0, Bound.CLOSED))) == 0.0

    def test_no_sign_change(self):
        """Same sign at both endpoints gives None."""
        f = lambda x: x**2 + 1

        assert bisection(f, Interval(-1.0, 1.0)) is None

    def test_maxiter_exhausted(self):
        """Too few iterations give None."""
        f = lambda x: x**3 - 2

        assert bisection(f, Interval(0.0, 2.0), maxiter=3) is None

    def test_custom_tolerance(self):
        """Loose tolerance stops early."""
        f = lambda x: x - 0.3

        root = bisection(f, Interval(0.0, 1.0), xtol=0.1, rtol=0.0)

        assert abs(float(root) - 0.3) < 0.1

    def test_float32(self):
        """Iterates follow the requested dtype."""
        f = lambda x: x**2 - 2

        root = bisection(f, Interval(1.0, 2.0), dtype=torch.float32)

        assert root.dtype == torch.float32
        assert abs(float(root) - math.sqrt(2)) < 1e-5

    def test_empty_interval_raises(self):
        """Empty intervals raise BracketError."""
        with pytest.raises(BracketError):
            bisection(lambda x: x, Interval(1.0, 0.0))

    def test_non_finite_interval_raises(self):
        """Infinite endpoints raise BracketError."""
        with pytest.raises(BracketError):
            bisection(lambda x: x, Interval(-math.inf, 1.0))
