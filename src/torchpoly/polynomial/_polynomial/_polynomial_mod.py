from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_mod(p: Polynomial, q: Polynomial) -> Polynomial:
    """Divide polynomials, returning remainder only.

    Parameters
    ----------
    p : Polynomial
        Dividend.
    q : Polynomial
        Divisor.

    Returns
    -------
    Polynomial
        Remainder of p / q.
    """
    _, remainder = polynomial_divmod(p, q)
    return remainder
