import torch

from ._polynomial import Polynomial, polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q)
    unless one factor is the zero polynomial.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q, trimmed.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    # Loop over the shorter factor
    if p_coeffs.shape[-1] > q_coeffs.shape[-1]:
        p_coeffs, q_coeffs = q_coeffs, p_coeffs

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # result[i + j] += p[i] * q[j]
    result = torch.zeros(
        n_p + n_q - 1, dtype=common_dtype, device=p_coeffs.device
    )
    for i in range(n_p):
        result[i : i + n_q] += p_coeffs[i] * q_coeffs

    return polynomial(result)
