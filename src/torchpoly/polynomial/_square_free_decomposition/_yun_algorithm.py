from torchpoly.polynomial._euclidean_algorithm import _rational
from torchpoly.polynomial._polynomial import Polynomial, polynomial_is_integer

from ._is_square_free import is_square_free
from ._polynomial_primitive_part import polynomial_primitive_part


def yun_algorithm(
    p: Polynomial,
    *,
    tol: float | None = None,
) -> list[Polynomial] | None:
    r"""Square-free decomposition by Yun's algorithm.

    Computes pairwise coprime square-free polynomials ``q_1, ..., q_k``
    with

    .. math::

        \operatorname{pp}(p) = q_1 q_2^2 \cdots q_k^k

    where :math:`\operatorname{pp}(p)` is the primitive part of ``p``. The
    roots of ``q_i`` are exactly the roots of ``p`` of multiplicity ``i``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Tolerance of the square-free and integrality tests. Default: policy
        epsilon of the dtype.

    Returns
    -------
    list[Polynomial] or None
        ``[p]`` if ``p`` is already square-free. Otherwise the
        decomposition of the primitive part: ``q_2`` to ``q_k`` are monic,
        ``q_1`` carries the leading coefficient, and other constant
        entries mark multiplicities without roots. ``None`` if ``p`` is not
        square-free and does not have integer coefficients.

    Notes
    -----
    With ``a = gcd(f, f')``, ``b = f / a`` and ``c = f' / a``, each step
    forms ``d = c - b'``; the GCD of ``b`` and ``d`` is the next factor,
    which is divided out of both. The iteration stops once ``d`` vanishes,
    emitting the remaining ``b``. The decomposition runs on the monic
    primitive part over exact rationals.

    Examples
    --------
    >>> p = polynomial_from_roots([1.0, 2.0, 2.0, 3.0, 3.0, 3.0])
    >>> [q.coeffs.tolist() for q in yun_algorithm(p)]
    [[-1.0, 1.0], [-2.0, 1.0], [-3.0, 1.0]]
    """
    if is_square_free(p, tol=tol):
        return [p]

    if not polynomial_is_integer(p, tol):
        return None

    dtype = p.coeffs.dtype

    f = _rational.to_rational(polynomial_primitive_part(p, tol))
    leading = f[-1]
    f = _rational.monic(f)
    df = _rational.derivative(f)

    a = _rational.gcd(f, df)
    b, _ = _rational.divmod_(f, a)
    c, _ = _rational.divmod_(df, a)

    factors = []
    while True:
        d = _rational.subtract(c, _rational.derivative(b))
        if _rational.is_zero(d):
            factors.append(b)
            break

        q = _rational.gcd(b, d)
        factors.append(q)
        b, _ = _rational.divmod_(b, q)
        c, _ = _rational.divmod_(d, q)

    # The first factor has exponent one, so it takes the leading coefficient
    factors[0] = _rational.scale(factors[0], leading)

    return [_rational.from_rational(q, dtype=dtype) for q in factors]
