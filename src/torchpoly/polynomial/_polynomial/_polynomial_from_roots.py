from typing import Sequence, Union

import torch
import torch.nn.functional
from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_from_roots(
    roots: Union[Tensor, Sequence[float]],
) -> Polynomial:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}). Repeated roots give
    repeated factors.

    Parameters
    ----------
    roots : Tensor or sequence of float
        Roots, shape (N,).

    Returns
    -------
    Polynomial
        Monic polynomial with given roots, degree N.

    Examples
    --------
    >>> p = polynomial_from_roots([1.0, 2.0])  # (x-1)(x-2) = x^2 - 3x + 2
    >>> p.coeffs
    tensor([ 2., -3.,  1.], dtype=torch.float64)
    """
    if not isinstance(roots, Tensor):
        roots = torch.as_tensor(roots, dtype=torch.float64)
    elif not roots.is_floating_point():
        roots = roots.to(torch.float64)

    roots = roots.reshape(-1)

    # Start with constant polynomial 1
    coeffs = torch.ones(1, dtype=roots.dtype, device=roots.device)

    # Multiply by (x - r_i) for each root
    for root_i in roots:
        # (c_0 + c_1*x + ... + c_i*x^i) * (x - r_i)
        # new_coeffs[j] = -r_i * c_j + c_{j-1}
        shifted = torch.nn.functional.pad(coeffs, (1, 0))
        scaled = torch.nn.functional.pad(coeffs, (0, 1)) * (-root_i)
        coeffs = shifted + scaled

    return polynomial(coeffs)
