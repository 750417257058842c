from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1. Polynomials are kept trimmed, so
        this is the actual degree; the zero polynomial has degree 0.
    """
    return p.coeffs.shape[-1] - 1
