from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_negate import polynomial_negate


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials, computes p - q.

    Returns
    -------
    Polynomial
        Difference p - q, trimmed.
    """
    return polynomial_add(p, polynomial_negate(q))
