import torch
import torch.nn.functional

from torchpoly.polynomial._numeric_policy import resolve_tolerance

from ._polynomial import Polynomial


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float | None = None,
) -> bool:
    """Check polynomial equality within tolerance.

    Two trimmed polynomials are equal iff they have the same degree and
    every coefficient pair differs by less than ``tol``. Padding the shorter
    coefficient vector with zeros is equivalent, since a trimmed leading
    coefficient is never nearly zero.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float, optional
        Absolute tolerance for coefficient comparison. Default: policy
        epsilon of the common dtype.

    Returns
    -------
    bool
        True if the polynomials are equal within tolerance.
    """
    common_dtype = torch.promote_types(p.coeffs.dtype, q.coeffs.dtype)
    p_coeffs = p.coeffs.to(common_dtype)
    q_coeffs = q.coeffs.to(common_dtype)
    tol = resolve_tolerance(common_dtype, tol)

    # Pad to same length
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    if n_p < n_q:
        p_coeffs = torch.nn.functional.pad(p_coeffs, (0, n_q - n_p))
    elif n_q < n_p:
        q_coeffs = torch.nn.functional.pad(q_coeffs, (0, n_p - n_q))

    # All coefficients must be within tolerance
    return bool(((p_coeffs - q_coeffs).abs() < tol).all())
