from torchpoly.polynomial._numeric_policy import resolve_tolerance
from torchpoly.polynomial._polynomial import (
    Polynomial,
    polynomial_divmod,
    polynomial_is_integer,
    polynomial_is_zero,
    polynomial_normalize,
)

from . import _rational


def euclidean(
    p: Polynomial,
    q: Polynomial,
    *,
    tol: float | None = None,
) -> Polynomial:
    """Greatest common divisor of two polynomials.

    Repeats ``a, b = b, a % b`` until ``b`` is zero and normalizes the last
    non-zero remainder. When both polynomials have integer coefficients the
    remainder sequence is computed exactly over rationals, so repeated roots
    survive the cancellation that a floating-point remainder sequence
    suffers.

    Parameters
    ----------
    p, q : Polynomial
        Input polynomials.
    tol : float, optional
        Zero-remainder tolerance. Default: policy epsilon of the dtype.

    Returns
    -------
    Polynomial
        Monic GCD. The GCD of two zero polynomials is the zero polynomial.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 1.0])  # x^2 - 1
    >>> q = polynomial([1.0, 2.0, 1.0])  # x^2 + 2x + 1
    >>> euclidean(p, q).coeffs  # x + 1
    tensor([1., 1.], dtype=torch.float64)
    """
    tol = resolve_tolerance(p.coeffs.dtype, tol)

    if polynomial_is_integer(p, tol) and polynomial_is_integer(q, tol):
        g = _rational.gcd(_rational.to_rational(p), _rational.to_rational(q))
        return _rational.from_rational(g, dtype=p.coeffs.dtype)

    a, b = p, q
    while not polynomial_is_zero(b, tol=tol):
        a, b = b, polynomial_divmod(a, b, tol=tol)[1]

    return polynomial_normalize(a)
