from typing import Sequence

import torch

from torchpoly.polynomial._polynomial import (
    Polynomial,
    polynomial_multiply,
    polynomial_one,
    polynomial_pow,
)


def from_square_free_decomposition(
    factors: Sequence[Polynomial],
) -> Polynomial:
    """Multiply a square-free decomposition back together.

    Computes ``factors[0] * factors[1]**2 * ... * factors[k-1]**k``. An
    empty sequence gives the constant ``1``.
    """
    dtype = factors[0].coeffs.dtype if factors else torch.float64

    result = polynomial_one(dtype)
    for i, q in enumerate(factors):
        result = polynomial_multiply(result, polynomial_pow(q, i + 1))

    return result
