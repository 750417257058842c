import torch

from torchpoly.polynomial._numeric_policy import resolve_tolerance

from ._polynomial import Polynomial


def polynomial_is_integer(p: Polynomial, tol: float | None = None) -> bool:
    """Check whether every coefficient is within ``tol`` of an integer.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Default: the policy epsilon of the coefficient dtype.

    Returns
    -------
    bool
        True if ``p`` has integer coefficients within tolerance.
    """
    coeffs = p.coeffs
    tol = resolve_tolerance(coeffs.dtype, tol)
    return bool(((coeffs - torch.round(coeffs)).abs() < tol).all())
