import torch

from torchpoly.polynomial._numeric_policy import resolve_tolerance

from ._polynomial import Polynomial


def polynomial_trim(p: Polynomial, tol: float | None = None) -> Polynomial:
    """Remove trailing near-zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Coefficients with ``|c| < tol`` count as zero. Default: the policy
        epsilon of the coefficient dtype.

    Returns
    -------
    Polynomial
        Trimmed polynomial with at least one coefficient. When every
        coefficient is nearly zero, only the constant term is kept.
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if n <= 1:
        return p

    tol = resolve_tolerance(coeffs.dtype, tol)

    # Find last position >= tol
    mask = coeffs.abs() >= tol
    if not mask.any():
        return Polynomial(coeffs=coeffs[:1])

    last_nonzero = int(torch.nonzero(mask).max())

    # Keep coefficients up to and including last_nonzero
    return Polynomial(coeffs=coeffs[: last_nonzero + 1])
