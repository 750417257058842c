from numbers import Number
from typing import Sequence, Union

from torch import Tensor

from torchpoly.polynomial import Polynomial, polynomial_evaluate
from torchpoly.polynomial._numeric_policy import resolve_tolerance


def sign_variations(
    seq: Sequence[Polynomial],
    x: Union[Number, Tensor],
    tol: float | None = None,
) -> list[int]:
    """Signs of a polynomial sequence evaluated at ``x``.

    Parameters
    ----------
    seq : sequence of Polynomial
        Typically a Sturm sequence.
    x : Number or Tensor
        Evaluation point (scalar).
    tol : float, optional
        Values with ``|s(x)| < tol`` are dropped. Default: policy epsilon of
        the coefficient dtype.

    Returns
    -------
    list[int]
        ``+1`` or ``-1`` per non-vanishing value, in sequence order.
    """
    if not seq:
        return []

    tol = resolve_tolerance(seq[0].coeffs.dtype, tol)

    signs = []
    for s in seq:
        value = float(polynomial_evaluate(s, x))
        if abs(value) >= tol:
            signs.append(1 if value > 0 else -1)

    return signs


def number_sign_variations(
    seq: Sequence[Polynomial],
    x: Union[Number, Tensor],
    tol: float | None = None,
) -> int:
    """Number of sign changes of ``seq`` evaluated at ``x``."""
    signs = sign_variations(seq, x, tol)
    return sum(1 for s, t in zip(signs, signs[1:]) if s != t)
