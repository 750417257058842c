from numbers import Number
from typing import Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial._numeric_policy import resolve_tolerance

from ._polynomial import Polynomial
from ._polynomial_evaluate import polynomial_evaluate


def polynomial_has_root(
    p: Polynomial,
    x: Union[Number, Tensor],
    tol: float | None = None,
) -> bool:
    """Check whether ``|p(x)| < tol``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    x : Number or Tensor
        Candidate root (scalar).
    tol : float, optional
        Default: the policy epsilon of the coefficient dtype.

    Returns
    -------
    bool
        True if x is a root of p within tolerance.
    """
    tol = resolve_tolerance(p.coeffs.dtype, tol)
    return abs(float(polynomial_evaluate(p, x))) < tol


def polynomial_has_roots(
    p: Polynomial,
    xs: Union[Tensor, Sequence[float]],
    tol: float | None = None,
) -> bool:
    """Check whether every value of ``xs`` is a root of ``p`` within tolerance."""
    tol = resolve_tolerance(p.coeffs.dtype, tol)
    if not isinstance(xs, Tensor):
        xs = torch.as_tensor(xs, dtype=p.coeffs.dtype)
    return bool((polynomial_evaluate(p, xs).abs() < tol).all())
