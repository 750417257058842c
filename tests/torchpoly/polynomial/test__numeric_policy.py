"""Tests for the per-dtype numeric policy."""

import pytest
import torch

from torchpoly.polynomial import (
    NumericPolicy,
    numeric_policy,
    polynomial,
    polynomial_is_zero,
)


class TestNumericPolicy:
    """Tests for numeric_policy."""

    @pytest.mark.parametrize(
        "dtype,epsilon",
        [
            (torch.float64, 1e-5),
            (torch.float32, 1e-4),
            (torch.float16, 1e-2),
            (torch.bfloat16, 1e-2),
        ],
    )
    def test_epsilon(self, dtype, epsilon):
        """Epsilon depends on the dtype."""
        policy = numeric_policy(dtype)
        assert isinstance(policy, NumericPolicy)
        assert policy.epsilon == epsilon

    def test_identities(self):
        """zero and one are 0-d tensors of the policy dtype."""
        policy = numeric_policy(torch.float32)
        assert policy.zero.dim() == 0
        assert policy.zero.item() == 0.0
        assert policy.one.item() == 1.0
        assert policy.one.dtype == torch.float32

    def test_nearly_zero(self):
        """nearly_zero compares against epsilon."""
        policy = numeric_policy(torch.float64)
        assert policy.nearly_zero(1e-6)
        assert policy.nearly_zero(torch.tensor(-1e-6))
        assert not policy.nearly_zero(1e-4)

    def test_policy_drives_trimming(self):
        """Trimming tolerance follows the coefficient dtype."""
        p64 = polynomial(torch.tensor([1.0, 5e-5], dtype=torch.float64))
        p32 = polynomial(torch.tensor([1.0, 5e-5], dtype=torch.float32))
        assert p64.coeffs.shape == (2,)
        assert p32.coeffs.shape == (1,)

    def test_frozen(self):
        """Policies are immutable."""
        policy = numeric_policy(torch.float64)
        with pytest.raises(AttributeError):
            policy.epsilon = 1.0

    def test_float32_zero_test(self):
        """is_zero uses the float32 epsilon."""
        assert polynomial_is_zero(
            polynomial(torch.tensor([5e-5], dtype=torch.float32))
        )
