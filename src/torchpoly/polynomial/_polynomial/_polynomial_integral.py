from numbers import Number
from typing import Union

from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_evaluate import polynomial_evaluate


def polynomial_integral(
    p: Polynomial,
    a: Union[Number, Tensor],
    b: Union[Number, Tensor],
) -> Tensor:
    """Compute definite integral.

    Parameters
    ----------
    p : Polynomial
        Polynomial to integrate.
    a, b : Number or Tensor
        Integration bounds.

    Returns
    -------
    Tensor
        Definite integral integral_a^b p(x) dx.

    Examples
    --------
    >>> p = polynomial([1.0, 0.0, 1.0])  # 1 + x^2
    >>> polynomial_integral(p, 0.0, 1.0)
    tensor(1.3333, dtype=torch.float64)
    """
    anti = polynomial_antiderivative(p, 0.0)

    return polynomial_evaluate(anti, b) - polynomial_evaluate(anti, a)
