import torch

from ._polynomial import Polynomial, polynomial


def polynomial_to_integer(p: Polynomial) -> Polynomial:
    """Round every coefficient to the nearest integer.

    The dtype is unchanged; use together with ``polynomial_is_integer``.
    """
    return polynomial(torch.round(p.coeffs))
