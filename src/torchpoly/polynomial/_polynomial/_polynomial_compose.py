from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_multiply import polynomial_multiply


def polynomial_compose(p: Polynomial, q: Polynomial) -> Polynomial:
    """Compose polynomials: compute p(q(x)).

    Uses Horner's method for efficient evaluation.

    Parameters
    ----------
    p : Polynomial
        Outer polynomial.
    q : Polynomial
        Inner polynomial (substituted for x).

    Returns
    -------
    Polynomial
        The composition p(q(x)).

    Examples
    --------
    >>> p = polynomial([0.0, 0.0, 1.0])  # x^2
    >>> q = polynomial([1.0, 1.0])  # x + 1
    >>> polynomial_compose(p, q).coeffs  # (x+1)^2 = x^2 + 2x + 1
    tensor([1., 2., 1.], dtype=torch.float64)
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    # result = a_n, then result = result * q + a_k
    result = polynomial(coeffs[n - 1 :])
    for k in range(n - 2, -1, -1):
        result = polynomial_add(
            polynomial_multiply(result, q), polynomial(coeffs[k : k + 1])
        )

    return result
