import torch
from torch import Tensor

from torchpoly.polynomial import Polynomial, polynomial_degree
from torchpoly.polynomial._numeric_policy import resolve_tolerance


def quadratic_roots(
    p: Polynomial,
    *,
    tol: float | None = None,
) -> Tensor | None:
    """Real roots of a quadratic by the quadratic formula.

    Parameters
    ----------
    p : Polynomial
        Polynomial ``a x^2 + b x + c``.
    tol : float, optional
        Discriminants in ``(-tol, 0)`` are treated as zero. Default: policy
        epsilon of the coefficient dtype.

    Returns
    -------
    Tensor or None
        ``[(-b + sqrt(D)) / 2a, (-b - sqrt(D)) / 2a]`` with
        ``D = b^2 - 4ac``; a double root appears twice. ``None`` if ``p`` is
        not of degree 2 or has no real roots.

    Examples
    --------
    >>> quadratic_roots(polynomial([2.0, -3.0, 1.0]))  # (x - 1)(x - 2)
    tensor([2., 1.], dtype=torch.float64)
    """
    if polynomial_degree(p) != 2:
        return None

    tol = resolve_tolerance(p.coeffs.dtype, tol)

    c, b, a = p.coeffs.unbind(-1)
    discriminant = b * b - 4 * a * c

    if float(discriminant) < -tol:
        return None

    sqrt_d = torch.sqrt(discriminant.clamp(min=0))
    return torch.stack([(-b + sqrt_d) / (2 * a), (-b - sqrt_d) / (2 * a)])
