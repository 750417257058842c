import math

import torch
from torch import Tensor

from torchpoly.polynomial import Polynomial, polynomial_degree
from torchpoly.polynomial._numeric_policy import resolve_tolerance


def _real_cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def cubic_roots(
    p: Polynomial,
    *,
    tol: float | None = None,
) -> Tensor | None:
    r"""Real roots of a cubic in closed form.

    The cubic is normalized to ``x^3 + b x^2 + c x + d`` and reduced by
    ``x = t - b / 3`` to the depressed cubic ``t^3 + P t + Q``. The sign of

    .. math::

        D = \left(\frac{Q}{2}\right)^2 + \left(\frac{P}{3}\right)^3

    selects the case: ``D > 0`` gives one real root (Cardano's formula),
    ``D = 0`` a double root, ``D < 0`` three distinct real roots
    (trigonometric form). ``D`` is compared with zero relative to the size
    of its two terms, so small cubics are classified like large ones.

    Parameters
    ----------
    p : Polynomial
        Polynomial of degree 3.
    tol : float, optional
        Relative tolerance of the ``D = 0`` and triple-root tests. Default:
        policy epsilon of the coefficient dtype.

    Returns
    -------
    Tensor or None
        Real roots in ascending order, shape (1,) or (3,); repeated roots
        are repeated. ``None`` if ``p`` is not of degree 3.

    Examples
    --------
    >>> p = polynomial_from_roots([2.0, -4.0, 5.0])
    >>> cubic_roots(p)
    tensor([-4.,  2.,  5.], dtype=torch.float64)
    """
    if polynomial_degree(p) != 3:
        return None

    dtype = p.coeffs.dtype
    tol = resolve_tolerance(dtype, tol)

    a0, a1, a2, a3 = p.coeffs.tolist()
    b, c, d = a2 / a3, a1 / a3, a0 / a3

    shift = -b / 3.0
    P = c - b * b / 3.0
    Q = 2.0 * b**3 / 27.0 - b * c / 3.0 + d

    # Roots closer than tol * scale to the shift count as one triple root
    scale = max(abs(shift), 1.0) * tol
    if abs(P) < scale**2 and abs(Q) < scale**3:
        roots = [shift, shift, shift]
    elif P == 0.0:
        roots = [_real_cbrt(-Q) + shift]
    else:
        D = (Q / 2.0) ** 2 + (P / 3.0) ** 3

        if abs(D) <= tol * max((Q / 2.0) ** 2, abs(P / 3.0) ** 3):
            # Simple root 3Q/P, double root -3Q/(2P)
            roots = [3.0 * Q / P + shift] + [-3.0 * Q / (2.0 * P) + shift] * 2
        elif D > 0:
            sqrt_d = math.sqrt(D)
            u = _real_cbrt(-Q / 2.0 + sqrt_d)
            v = _real_cbrt(-Q / 2.0 - sqrt_d)
            roots = [u + v + shift]
        else:
            r = 2.0 * math.sqrt(-P / 3.0)
            cos_arg = 3.0 * Q / (2.0 * P) * math.sqrt(-3.0 / P)
            phi = math.acos(max(-1.0, min(1.0, cos_arg)))
            roots = [
                r * math.cos((phi - 2.0 * math.pi * k) / 3.0) + shift
                for k in range(3)
            ]

    return torch.tensor(sorted(roots), dtype=dtype)
