from ._polynomial import Polynomial
from ._polynomial_is_zero import polynomial_is_zero
from ._polynomial_scale import polynomial_scale


def polynomial_normalize(p: Polynomial) -> Polynomial:
    """Divide polynomial by its leading coefficient.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Monic polynomial. The zero polynomial is returned unchanged.
    """
    if polynomial_is_zero(p):
        return p

    return polynomial_scale(p, 1.0 / p.coeffs[-1])
