from torchpoly.polynomial._euclidean_algorithm import euclidean
from torchpoly.polynomial._polynomial import (
    Polynomial,
    polynomial_derivative,
    polynomial_is_constant,
)


def is_square_free(p: Polynomial, *, tol: float | None = None) -> bool:
    """Check whether ``p`` has no repeated roots.

    A polynomial is square-free iff ``gcd(p, p')`` is constant.

    Examples
    --------
    >>> is_square_free(polynomial([-1.0, 0.0, 1.0]))  # (x - 1)(x + 1)
    True
    >>> is_square_free(polynomial([1.0, -2.0, 1.0]))  # (x - 1)^2
    False
    """
    return polynomial_is_constant(
        euclidean(p, polynomial_derivative(p), tol=tol)
    )
