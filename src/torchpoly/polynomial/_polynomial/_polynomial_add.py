import torch
import torch.nn.functional

from ._polynomial import Polynomial, polynomial


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q, trimmed.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n = max(p_coeffs.shape[-1], q_coeffs.shape[-1])

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    # Pad to same length
    p_padded = torch.nn.functional.pad(
        p_coeffs.to(common_dtype), (0, n - p_coeffs.shape[-1])
    )
    q_padded = torch.nn.functional.pad(
        q_coeffs.to(common_dtype), (0, n - q_coeffs.shape[-1])
    )

    return polynomial(p_padded + q_padded)
