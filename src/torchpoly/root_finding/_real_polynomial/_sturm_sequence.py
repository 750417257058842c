from torchpoly.polynomial import (
    Polynomial,
    polynomial_derivative,
    polynomial_divmod,
    polynomial_is_constant,
    polynomial_negate,
)


def sturm_sequence(
    p: Polynomial,
    *,
    tol: float | None = None,
) -> list[Polynomial]:
    """Sturm sequence of a polynomial.

    The sequence starts with ``p`` and ``p'``; every further term is the
    negated remainder of the two preceding terms. It ends with the first
    constant term.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Zero-divisor tolerance of the remainders. Default: policy epsilon.

    Returns
    -------
    list[Polynomial]
        ``[p, p', -rem(p, p'), ...]``.

    Examples
    --------
    >>> p = polynomial([-1.0, -1.0, 0.0, 1.0, 1.0])  # x^4 + x^3 - x - 1
    >>> [s.coeffs.tolist() for s in sturm_sequence(p)][2:]
    [[0.9375, 0.75, 0.1875], [-64.0, -32.0], [-0.1875]]
    """
    seq = [p, polynomial_derivative(p)]

    while not polynomial_is_constant(seq[-1]):
        _, remainder = polynomial_divmod(seq[-2], seq[-1], tol=tol)
        seq.append(polynomial_negate(remainder))

    return seq
