from torchpoly.polynomial import Polynomial, is_square_free
from torchpoly.root_finding._interval import Interval

from ._cauchy_bound import cauchy_bound
from ._sign_variations import number_sign_variations
from ._sturm_sequence import sturm_sequence


def number_distinct_roots(
    p: Polynomial,
    interval: Interval | None = None,
    *,
    tol: float | None = None,
) -> int | None:
    """Count the distinct real roots of ``p`` in an interval.

    By Sturm's theorem the number of distinct roots in ``(a, b]`` is
    ``V(a) - V(b)``, where ``V(x)`` is the number of sign changes of the
    Sturm sequence evaluated at ``x``.

    Parameters
    ----------
    p : Polynomial
        Square-free polynomial.
    interval : Interval, optional
        Search interval. Default: ``(-B, B]`` with ``B`` the Cauchy bound,
        which contains every real root.
    tol : float, optional
        Default: policy epsilon of the coefficient dtype.

    Returns
    -------
    int or None
        Number of distinct real roots. ``None`` if ``p`` is not square-free
        (decompose it with ``yun_algorithm`` first) or is the zero
        polynomial.

    Examples
    --------
    >>> p = polynomial([-1.0, -1.0, 0.0, 1.0, 1.0])  # x^4 + x^3 - x - 1
    >>> number_distinct_roots(p)
    2
    """
    if not is_square_free(p, tol=tol):
        return None

    if interval is None:
        bound = cauchy_bound(p)
        if bound is None:
            return None
        interval = Interval(-bound, bound)

    seq = sturm_sequence(p, tol=tol)
    return number_sign_variations(
        seq, interval.lower, tol
    ) - number_sign_variations(seq, interval.upper, tol)
