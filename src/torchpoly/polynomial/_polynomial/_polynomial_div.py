from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_div(p: Polynomial, q: Polynomial) -> Polynomial:
    """Divide polynomials, returning quotient only.

    Parameters
    ----------
    p : Polynomial
        Dividend.
    q : Polynomial
        Divisor.

    Returns
    -------
    Polynomial
        Quotient of p / q.
    """
    quotient, _ = polynomial_divmod(p, q)
    return quotient
