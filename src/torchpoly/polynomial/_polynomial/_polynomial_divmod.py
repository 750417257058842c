import torch

from torchpoly.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial, polynomial
from ._polynomial_is_zero import polynomial_is_zero


def polynomial_divmod(
    p: Polynomial,
    q: Polynomial,
    *,
    tol: float | None = None,
) -> tuple[Polynomial, Polynomial]:
    """Divide polynomial p by q, returning quotient and remainder.

    Computes quotient and remainder such that p = q * quotient + remainder,
    where deg(remainder) < deg(q) or the remainder is zero (Euclidean
    division).

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial. Must not be the zero polynomial.
    tol : float, optional
        Tolerance of the zero-divisor test. Default: policy epsilon.

    Returns
    -------
    quotient : Polynomial
        Quotient of division.
    remainder : Polynomial
        Remainder of division.

    Raises
    ------
    DegreeError
        If divisor is the zero polynomial.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 0.0, 1.0])  # x^3 - 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> quot, rem = polynomial_divmod(p, q)
    >>> quot.coeffs  # x^2 + x + 1
    tensor([1., 1., 1.], dtype=torch.float64)
    """
    if polynomial_is_zero(q, tol=tol):
        raise DegreeError("Cannot divide by zero polynomial")

    # Promote to common dtype
    common_dtype = torch.promote_types(p.coeffs.dtype, q.coeffs.dtype)
    p_coeffs = p.coeffs.to(common_dtype)
    q_coeffs = q.coeffs.to(common_dtype)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # If dividend degree < divisor degree, quotient is 0, remainder is dividend
    if n_p < n_q:
        zero = torch.zeros(1, dtype=common_dtype, device=p_coeffs.device)
        return polynomial(zero), p

    remainder = p_coeffs.clone()
    quotient = torch.zeros(
        n_p - n_q + 1, dtype=common_dtype, device=p_coeffs.device
    )
    leading = q_coeffs[-1]

    # Subtract (leading ratio) * x^k * q, highest power first
    for k in range(n_p - n_q, -1, -1):
        ratio = remainder[k + n_q - 1] / leading
        quotient[k] = ratio
        remainder[k : k + n_q] -= ratio * q_coeffs

    # The top n_p - n_q + 1 entries were eliminated
    if n_q == 1:
        remainder = torch.zeros(1, dtype=common_dtype, device=p_coeffs.device)
    else:
        remainder = remainder[: n_q - 1]

    return polynomial(quotient), polynomial(remainder)
