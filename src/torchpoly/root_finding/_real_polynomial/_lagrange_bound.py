from torchpoly.polynomial import (
    Polynomial,
    polynomial_is_constant,
    polynomial_is_zero,
)


def lagrange_bound(p: Polynomial) -> float | None:
    r"""Lagrange's upper bound on the magnitude of the roots of ``p``.

    .. math::

        B = \max\left(1, \sum_{0 \le i < n} \left| \frac{a_i}{a_n} \right|\right)

    Returns ``1.0`` for a non-zero constant and ``None`` for the zero
    polynomial.
    """
    if polynomial_is_zero(p):
        return None
    if polynomial_is_constant(p):
        return 1.0

    coeffs = p.coeffs
    return max(1.0, float((coeffs[:-1] / coeffs[-1]).abs().sum()))
