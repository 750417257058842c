from ._polynomial import Polynomial, polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        -p.
    """
    return polynomial(-p.coeffs)
