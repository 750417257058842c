from torchpoly.polynomial import (
    Polynomial,
    polynomial_is_constant,
    polynomial_is_zero,
)


def cauchy_bound(p: Polynomial) -> float | None:
    r"""Cauchy's upper bound on the magnitude of the roots of ``p``.

    .. math::

        B = 1 + \max_{0 \le i < n} \left| \frac{a_i}{a_n} \right|

    Every real (and complex) root ``x`` satisfies ``|x| < B``.

    Returns
    -------
    float or None
        The bound, ``1.0`` for a non-zero constant, ``None`` for the zero
        polynomial.

    Examples
    --------
    >>> p = polynomial([-9.0, 0.0, -2.0, -6.0, 3.0])
    >>> cauchy_bound(p)
    4.0
    """
    if polynomial_is_zero(p):
        return None
    if polynomial_is_constant(p):
        return 1.0

    coeffs = p.coeffs
    return 1.0 + float((coeffs[:-1] / coeffs[-1]).abs().max())
