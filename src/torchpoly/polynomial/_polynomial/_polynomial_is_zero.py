from torchpoly.polynomial._numeric_policy import resolve_tolerance

from ._polynomial import Polynomial


def polynomial_is_zero(p: Polynomial, tol: float | None = None) -> bool:
    """Check whether ``p`` is the zero polynomial within tolerance.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Default: the policy epsilon of the coefficient dtype.

    Returns
    -------
    bool
        True if ``p`` has degree 0 and ``|p[0]| < tol``.
    """
    coeffs = p.coeffs
    tol = resolve_tolerance(coeffs.dtype, tol)
    return coeffs.shape[-1] == 1 and abs(float(coeffs[0])) < tol
