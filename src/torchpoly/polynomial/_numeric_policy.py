"""Numeric policy bundling tolerance and identities per coefficient dtype."""

from dataclasses import dataclass

import torch
from torch import Tensor


@dataclass(frozen=True)
class NumericPolicy:
    """Tolerance and identity elements for one coefficient dtype.

    Attributes
    ----------
    dtype : torch.dtype
        Floating-point coefficient dtype.
    epsilon : float
        Absolute tolerance used by every tolerance-based polynomial test
        (trimming, zero tests, equality, root membership).
    """

    dtype: torch.dtype
    epsilon: float

    @property
    def zero(self) -> Tensor:
        """Additive identity as a 0-d tensor."""
        return torch.zeros((), dtype=self.dtype)

    @property
    def one(self) -> Tensor:
        """Multiplicative identity as a 0-d tensor."""
        return torch.ones((), dtype=self.dtype)

    def nearly_zero(self, value) -> bool:
        """Return True if ``|value| < epsilon``."""
        return abs(float(value)) < self.epsilon


def numeric_policy(dtype: torch.dtype) -> NumericPolicy:
    """Return the numeric policy for a coefficient dtype.

    Parameters
    ----------
    dtype : torch.dtype
        The coefficient dtype.

    Returns
    -------
    NumericPolicy
        Policy with a dtype-appropriate epsilon.

    Examples
    --------
    >>> numeric_policy(torch.float64).epsilon
    1e-05
    """
    if dtype in (torch.float16, torch.bfloat16):
        return NumericPolicy(dtype=dtype, epsilon=1e-2)
    elif dtype == torch.float32:
        return NumericPolicy(dtype=dtype, epsilon=1e-4)
    else:  # float64 and others
        return NumericPolicy(dtype=dtype, epsilon=1e-5)


def resolve_tolerance(dtype: torch.dtype, tol: float | None) -> float:
    """Return ``tol`` if given, else the policy epsilon for ``dtype``."""
    if tol is not None:
        return tol
    return numeric_policy(dtype).epsilon
