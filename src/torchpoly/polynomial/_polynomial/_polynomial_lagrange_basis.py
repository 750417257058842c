from typing import Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial, polynomial
from ._polynomial_from_roots import polynomial_from_roots


def _as_nodes(xs: Union[Tensor, Sequence[float]]) -> Tensor:
    if not isinstance(xs, Tensor):
        xs = torch.as_tensor(xs, dtype=torch.float64)
    elif not xs.is_floating_point():
        xs = xs.to(torch.float64)

    xs = xs.reshape(-1)

    if xs.numel() == 0:
        raise PolynomialError("Interpolation needs at least one node")

    if torch.unique(xs).numel() != xs.numel():
        raise PolynomialError(
            f"Interpolation nodes must be distinct, got {xs.tolist()}"
        )

    return xs


def polynomial_lagrange_basis(
    xs: Union[Tensor, Sequence[float]],
) -> list[Polynomial]:
    r"""Lagrange basis polynomials for a set of nodes.

    .. math::

        l_j(x) = \prod_{m \ne j} \frac{x - x_m}{x_j - x_m}

    Parameters
    ----------
    xs : Tensor or sequence of float
        Distinct nodes ``x_0, ..., x_{k-1}``, shape (k,).

    Returns
    -------
    list[Polynomial]
        ``k`` polynomials of degree ``k - 1`` with ``l_j(x_m) = 1`` if
        ``j == m`` and ``0`` otherwise.

    Raises
    ------
    PolynomialError
        If ``xs`` is empty or has repeated nodes.

    Examples
    --------
    >>> basis = polynomial_lagrange_basis([1.0, 2.0])
    >>> [l.coeffs.tolist() for l in basis]
    [[2.0, -1.0], [-1.0, 1.0]]
    """
    xs = _as_nodes(xs)

    basis = []
    for j in range(xs.numel()):
        others = torch.cat([xs[:j], xs[j + 1 :]])
        denominator = torch.prod(xs[j] - others)
        # Kept untrimmed: 1 / denominator may be tiny for wide node sets
        basis.append(
            polynomial(polynomial_from_roots(others).coeffs / denominator, tol=0.0)
        )

    return basis
