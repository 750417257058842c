import torch

from ._polynomial import Polynomial, polynomial


def polynomial_monomial(
    degree: int,
    coefficient: float = 1.0,
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Create the monomial ``coefficient * x^degree``.

    Parameters
    ----------
    degree : int
        Non-negative power of x.
    coefficient : float
        Coefficient of the monomial (default 1).
    dtype : torch.dtype
        Coefficient dtype (default float64).

    Returns
    -------
    Polynomial
        The monomial.

    Raises
    ------
    ValueError
        If degree is negative.

    Examples
    --------
    >>> X = polynomial_monomial(1)
    >>> (X ** 2 - 1).coeffs
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}")

    coeffs = torch.zeros(degree + 1, dtype=dtype)
    coeffs[degree] = coefficient
    return polynomial(coeffs)
