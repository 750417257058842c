from numbers import Number
from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Union[Number, Tensor]) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Number or Tensor
        Evaluation point(s), any shape. Evaluated element-wise.

    Returns
    -------
    Tensor
        Values p(x), same shape as x, in the common dtype of x and the
        coefficients.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = p.coeffs

    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, dtype=coeffs.dtype, device=coeffs.device)

    # Promote to common dtype
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    # b_n = a_n, b_k = a_k + x * b_{k+1}
    result = torch.full_like(x, 0.0) + coeffs[-1]
    for k in range(coeffs.shape[-1] - 2, -1, -1):
        result = result * x + coeffs[k]

    return result
