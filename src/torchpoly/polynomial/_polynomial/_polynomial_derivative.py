import torch

from ._polynomial import Polynomial, polynomial


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant polynomial returns the zero
        polynomial.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 2 + 6x
    tensor([2., 6.], dtype=torch.float64)
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    coeffs = p.coeffs

    for _ in range(order):
        n = coeffs.shape[-1]
        if n <= 1:
            # Derivative of constant is zero
            return polynomial(
                torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)
            )

        # d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
        # = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)
        indices = torch.arange(1, n, device=coeffs.device, dtype=coeffs.dtype)
        coeffs = coeffs[1:] * indices

    return polynomial(coeffs)
