from typing import Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial import Polynomial
from torchpoly.polynomial._numeric_policy import resolve_tolerance


def sign_changes(
    values: Union[Tensor, Sequence[float]],
    tol: float | None = None,
) -> int:
    """Count sign changes in a sequence of numbers.

    Entries with ``|v| < tol`` are skipped.

    Parameters
    ----------
    values : Tensor or sequence of float
        Numbers, shape (N,).
    tol : float, optional
        Default: policy epsilon of the dtype.

    Returns
    -------
    int
        Number of adjacent pairs of opposite sign after dropping nearly
        zero entries.

    Examples
    --------
    >>> sign_changes([1.0, 0.0, -2.0, -3.0, 4.0])
    2
    """
    if not isinstance(values, Tensor):
        values = torch.as_tensor(values, dtype=torch.float64)

    tol = resolve_tolerance(values.dtype, tol)

    signs = [v > 0 for v in values.tolist() if abs(v) >= tol]
    return sum(1 for s, t in zip(signs, signs[1:]) if s != t)


def coefficient_sign_changes(p: Polynomial, tol: float | None = None) -> int:
    """Count sign changes in the coefficients of ``p``.

    By Descartes' rule of signs this is an upper bound on the number of
    positive real roots, and exceeds it by an even number.
    """
    return sign_changes(p.coeffs, tol)
