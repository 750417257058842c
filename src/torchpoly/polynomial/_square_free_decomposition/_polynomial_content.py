import math

from torchpoly.polynomial._polynomial import Polynomial, polynomial_is_integer


def polynomial_content(p: Polynomial, tol: float | None = None) -> int | None:
    """Greatest common divisor of the coefficients of an integer polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Integrality tolerance. Default: policy epsilon of the dtype.

    Returns
    -------
    int or None
        Non-negative content, ``0`` for the zero polynomial. ``None`` if
        ``p`` does not have integer coefficients.

    Examples
    --------
    >>> polynomial_content(polynomial([6.0, -4.0, 2.0]))
    2
    """
    if not polynomial_is_integer(p, tol):
        return None

    return math.gcd(*(round(c) for c in p.coeffs.tolist()))
