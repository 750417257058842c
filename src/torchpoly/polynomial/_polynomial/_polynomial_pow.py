from ._polynomial import Polynomial
from ._polynomial_constant import polynomial_one
from ._polynomial_multiply import polynomial_multiply


def polynomial_pow(p: Polynomial, n: int) -> Polynomial:
    """Raise polynomial to non-negative integer power.

    Uses binary exponentiation (repeated squaring) for efficiency.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        p raised to power n.

    Raises
    ------
    ValueError
        If n is negative.

    Examples
    --------
    >>> p = polynomial([1.0, 1.0])  # 1 + x
    >>> polynomial_pow(p, 3).coeffs  # 1 + 3x + 3x^2 + x^3
    tensor([1., 3., 3., 1.], dtype=torch.float64)
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")

    if n == 0:
        return polynomial_one(dtype=p.coeffs.dtype)

    if n == 1:
        return p

    # Binary exponentiation
    result = None
    base = p

    while n > 0:
        if n & 1:  # If current bit is 1
            if result is None:
                result = base
            else:
                result = polynomial_multiply(result, base)
        n >>= 1
        if n > 0:
            base = polynomial_multiply(base, base)

    return result
