from numbers import Number
from typing import Union

from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_scale(p: Polynomial, c: Union[Number, Tensor]) -> Polynomial:
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : Number or Tensor
        Scalar (0-d tensor or Python number).

    Returns
    -------
    Polynomial
        Scaled polynomial c * p. Scaling by zero gives the zero polynomial.
    """
    coeffs = p.coeffs
    if isinstance(c, Tensor):
        c = c.to(coeffs.dtype)
    return polynomial(coeffs * c)
