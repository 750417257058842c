import torch

from ._polynomial import Polynomial, polynomial


def polynomial_constant(
    value: float,
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Create the constant polynomial ``value``."""
    return polynomial(torch.tensor([value], dtype=dtype))


def polynomial_zero(dtype: torch.dtype = torch.float64) -> Polynomial:
    """Create the zero polynomial."""
    return polynomial_constant(0.0, dtype=dtype)


def polynomial_one(dtype: torch.dtype = torch.float64) -> Polynomial:
    """Create the constant polynomial 1."""
    return polynomial_constant(1.0, dtype=dtype)
