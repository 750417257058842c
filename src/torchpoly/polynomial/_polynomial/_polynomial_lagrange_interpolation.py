from typing import Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial, polynomial
from ._polynomial_lagrange_basis import polynomial_lagrange_basis


def polynomial_lagrange_interpolation(
    xs: Union[Tensor, Sequence[float]],
    ys: Union[Tensor, Sequence[float]],
) -> Polynomial:
    """Interpolating polynomial through the points ``(xs[j], ys[j])``.

    Computed as ``sum_j ys[j] * l_j`` over the Lagrange basis of ``xs``.

    Parameters
    ----------
    xs : Tensor or sequence of float
        Distinct nodes, shape (k,).
    ys : Tensor or sequence of float
        Values at the nodes, shape (k,).

    Returns
    -------
    Polynomial
        The unique polynomial of degree at most ``k - 1`` with
        ``p(xs[j]) == ys[j]``. Leading coefficients that cancel are trimmed,
        so data sampled from a lower degree polynomial gives that
        polynomial back.

    Raises
    ------
    PolynomialError
        If ``xs`` and ``ys`` differ in length, ``xs`` is empty, or the nodes
        are not distinct.

    Examples
    --------
    >>> p = polynomial_lagrange_interpolation([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
    >>> polynomial_degree(p)
    1
    >>> float(p(2.5))
    5.0
    """
    if not isinstance(ys, Tensor):
        ys = torch.as_tensor(ys, dtype=torch.float64)

    basis = polynomial_lagrange_basis(xs)
    ys = ys.reshape(-1)

    if ys.numel() != len(basis):
        raise PolynomialError(
            f"Expected {len(basis)} values, one per node, got {ys.numel()}"
        )

    dtype = basis[0].coeffs.dtype
    ys = ys.to(dtype)

    coeffs = torch.zeros(len(basis), dtype=dtype)
    for y, l in zip(ys, basis):
        coeffs[: l.coeffs.numel()] += y * l.coeffs

    return polynomial(coeffs)
