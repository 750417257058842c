from torchpoly.polynomial._numeric_policy import resolve_tolerance
from torchpoly.polynomial._polynomial import (
    Polynomial,
    polynomial_divmod,
    polynomial_is_zero,
    polynomial_multiply,
    polynomial_one,
    polynomial_subtract,
    polynomial_zero,
)


def extended_euclidean(
    p: Polynomial,
    q: Polynomial,
    *,
    tol: float | None = None,
) -> tuple[Polynomial, Polynomial, Polynomial]:
    """Extended Euclidean algorithm.

    Computes Bezout coefficients ``s`` and ``t`` together with the GCD
    ``g`` such that ``s * p + t * q == g``.

    Parameters
    ----------
    p, q : Polynomial
        Input polynomials.
    tol : float, optional
        Zero-remainder tolerance. Default: policy epsilon of the dtype.

    Returns
    -------
    s : Polynomial
        Bezout coefficient of ``p``.
    t : Polynomial
        Bezout coefficient of ``q``.
    g : Polynomial
        Last non-zero remainder. Not normalized.

    Examples
    --------
    >>> p = polynomial([15.0, 12.0, -6.0, -2.0, 1.0])
    >>> q = polynomial([-4.0, -4.0, 1.0, 1.0])
    >>> s, t, g = extended_euclidean(p, q)
    >>> g.coeffs  # 5x + 5
    tensor([5., 5.], dtype=torch.float64)
    """
    dtype = p.coeffs.dtype
    tol = resolve_tolerance(dtype, tol)

    r0, r1 = p, q
    s0, s1 = polynomial_one(dtype), polynomial_zero(dtype)
    t0, t1 = polynomial_zero(dtype), polynomial_one(dtype)

    while not polynomial_is_zero(r1, tol=tol):
        quotient, remainder = polynomial_divmod(r0, r1, tol=tol)
        r0, r1 = r1, remainder
        s0, s1 = s1, polynomial_subtract(s0, polynomial_multiply(quotient, s1))
        t0, t1 = t1, polynomial_subtract(t0, polynomial_multiply(quotient, t1))

    return s0, t0, r0
