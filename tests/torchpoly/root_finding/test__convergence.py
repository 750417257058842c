# tests/torchpoly/root_finding/test__convergence.py
import torch

from torchpoly.root_finding._convergence import (
    check_convergence,
    default_tolerances,
    resolve_tolerances,
)


class TestDefaultTolerances:
    """Tests for dtype-aware default tolerances."""

    def test_float64_tolerances(self):
        """float64 has tightest tolerances."""
        tols = default_tolerances(torch.float64)
        assert tols["xtol"] == 1e-12
        assert tols["rtol"] == 1e-9
        assert tols["ftol"] == 1e-12

    def test_float32_tolerances(self):
        """float32 has medium tolerances."""
        tols = default_tolerances(torch.float32)
        assert tols["xtol"] == 1e-6
        assert tols["rtol"] == 1e-5
        assert tols["ftol"] == 1e-6

    def test_half_precision_tolerances(self):
        """float16 and bfloat16 have loose tolerances."""
        for dtype in (torch.float16, torch.bfloat16):
            tols = default_tolerances(dtype)
            assert tols == {"xtol": 1e-3, "rtol": 1e-2, "ftol": 1e-3}

    def test_resolve_keeps_overrides(self):
        """Explicit tolerances win over defaults."""
        assert resolve_tolerances(torch.float64, 1e-3, None, None) == (
            1e-3,
            1e-9,
            1e-12,
        )


class TestCheckConvergence:
    """Tests for convergence checking."""

    def test_converged_by_xtol(self):
        """Converged when x change is small."""
        converged = check_convergence(
            torch.tensor(1.0),
            torch.tensor(1.0 + 1e-8),
            torch.tensor(1.0),
            xtol=1e-6,
            rtol=0.0,
            ftol=0.0,
        )
        assert converged

    def test_converged_by_ftol(self):
        """Converged when f is small."""
        converged = check_convergence(
            torch.tensor(1.0),
            torch.tensor(2.0),
            torch.tensor(1e-10),
            xtol=0.0,
            rtol=0.0,
            ftol=1e-6,
        )
        assert converged

    def test_converged_by_rtol(self):
        """Converged when relative x change is small."""
        converged = check_convergence(
            torch.tensor(1000.0, dtype=torch.float64),
            torch.tensor(1000.001, dtype=torch.float64),
            torch.tensor(1.0),
            xtol=0.0,
            rtol=1e-5,
            ftol=0.0,
        )
        assert converged

    def test_not_converged(self):
        """Large step and large residual."""
        converged = check_convergence(
            torch.tensor(1.0),
            torch.tensor(2.0),
            torch.tensor(1.0),
            xtol=1e-6,
            rtol=1e-6,
            ftol=1e-6,
        )
        assert not converged
