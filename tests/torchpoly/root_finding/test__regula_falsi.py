# tests/torchpoly/root_finding/test__regula_falsi.py
import math

import pytest
import torch

from torchpoly.polynomial import polynomial_from_roots
from torchpoly.root_finding import Bound, BracketError, Interval, regula_falsi


class TestRegulaFalsi:
    """Tests for the false position method."""

    def test_simple_quadratic(self):
        """Find sqrt(2) by solving x^2 - 2 = 0."""
        f = lambda x: x**2 - 2

        root = regula_falsi(f, Interval(1.0, 2.0))

        assert abs(float(root) - math.sqrt(2)) < 1e-8

    def test_cubic(self):
        """Real root of x^3 - x - 2."""
        f = lambda x: x**3 - x - 2

        root = regula_falsi(f, Interval(1.0, 2.0))

        assert abs(float(f(root))) < 1e-8

    def test_linear_exact(self):
        """A linear function is solved in one step."""
        f = lambda x: 2 * x - 1

        root = regula_falsi(f, Interval(0.0, 3.0))

        torch.testing.assert_close(root, torch.tensor(0.5, dtype=torch.float64))

    def test_polynomial_callable(self):
        """Polynomials are callables."""
        p = polynomial_from_roots([-2.0, 0.75, 4.0])

        root = regula_falsi(p, Interval(0.0, 2.0))

        assert abs(float(root) - 0.75) < 1e-8

    def test_excluded_endpoint_root(self):
        """Only endpoints inside the interval are returned as roots."""
        p = polynomial_from_roots([-0.3, 0.0, 0.5])

        assert regula_falsi(p, Interval(0.0, 1.0)) is None
        assert float(regula_falsi(p, Interval(0.0, 1.0, Bound.CLOSED))) == 0.0

    def test_no_sign_change(self):
        """Same sign at both endpoints gives None."""
        assert regula_falsi(lambda x: x**2 + 1, Interval(-1.0, 1.0)) is None

    def test_maxiter_exhausted(self):
        """Too few iterations give None."""
        f = lambda x: x**3 - x - 2

        assert regula_falsi(f, Interval(1.0, 2.0), maxiter=2) is None

    def test_empty_interval_raises(self):
        """Empty intervals raise BracketError."""
        with pytest.raises(BracketError):
            regula_falsi(lambda x: x, Interval(1.0, 0.0))
