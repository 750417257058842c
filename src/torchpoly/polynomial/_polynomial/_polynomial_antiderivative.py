from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_antiderivative(
    p: Polynomial,
    constant: Union[Tensor, float] = 0.0,
) -> Polynomial:
    """Compute antiderivative (indefinite integral).

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    constant : Tensor or float
        Integration constant, i.e. the value of the result at 0 (default 0).

    Returns
    -------
    Polynomial
        Antiderivative with given constant term. Degree increases by 1
        unless p is the zero polynomial.

    Examples
    --------
    >>> p = polynomial([2.0, 6.0])  # 2 + 6x
    >>> polynomial_antiderivative(p).coeffs  # 0 + 2x + 3x^2
    tensor([0., 2., 3.], dtype=torch.float64)
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    # Integral of (a_0 + a_1*x + ... + a_n*x^n)
    # = C + a_0*x + a_1*x^2/2 + a_2*x^3/3 + ... + a_n*x^(n+1)/(n+1)
    indices = torch.arange(1, n + 1, device=coeffs.device, dtype=coeffs.dtype)
    integrated = coeffs / indices

    if isinstance(constant, Tensor):
        c = constant.to(coeffs.dtype).reshape(1)
    else:
        c = torch.tensor([constant], dtype=coeffs.dtype, device=coeffs.device)

    return polynomial(torch.cat([c, integrated]))
