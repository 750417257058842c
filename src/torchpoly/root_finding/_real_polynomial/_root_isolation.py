import warnings

from torchpoly.polynomial import (
    Polynomial,
    is_square_free,
    polynomial_evaluate,
    polynomial_is_constant,
)
from torchpoly.polynomial._numeric_policy import resolve_tolerance
from torchpoly.root_finding._interval import Interval

from ._cauchy_bound import cauchy_bound
from ._sign_variations import number_sign_variations
from ._sturm_sequence import sturm_sequence


def _split_point(p: Polynomial, interval: Interval, tol: float) -> float:
    # Move the split point off near-roots of p, staying inside the interval.
    mid = interval.midpoint
    if abs(float(polynomial_evaluate(p, mid))) >= tol:
        return mid

    step = tol
    for _ in range(64):
        candidate = mid + step
        if candidate >= interval.upper:
            break
        if abs(float(polynomial_evaluate(p, candidate))) >= tol:
            return candidate
        step *= 2

    return mid


def root_isolation(
    p: Polynomial,
    *,
    max_depth: int = 100,
    tol: float | None = None,
) -> list[Interval]:
    """Isolate the distinct real roots of a square-free polynomial.

    Starting from ``(-B, B]`` with ``B`` the Cauchy bound, intervals are
    bisected until the Sturm count of every interval is zero (discarded) or
    one (emitted). Left halves are processed before right halves, so the
    intervals come out in ascending order.

    Parameters
    ----------
    p : Polynomial
        Square-free polynomial.
    max_depth : int, default=100
        Maximum number of bisections along one branch. Intervals still
        holding several roots at this depth are dropped with a
        ``RuntimeWarning``.
    tol : float, optional
        Default: policy epsilon of the coefficient dtype.

    Returns
    -------
    list[Interval]
        Pairwise disjoint half-open intervals ``(a, b]``, each containing
        exactly one root of ``p``. Empty if ``p`` is constant or not
        square-free.

    Examples
    --------
    >>> p = polynomial_from_roots([-1.0, 0.5, 2.0])
    >>> len(root_isolation(p))
    3
    """
    if polynomial_is_constant(p) or not is_square_free(p, tol=tol):
        return []

    tol = resolve_tolerance(p.coeffs.dtype, tol)

    bound = cauchy_bound(p)
    seq = sturm_sequence(p, tol=tol)

    def variations(x: float) -> int:
        return number_sign_variations(seq, x, tol)

    initial = Interval(-bound, bound)
    stack = [
        (initial, variations(initial.lower), variations(initial.upper), 0)
    ]
    intervals = []

    while stack:
        interval, v_lower, v_upper, depth = stack.pop()
        count = v_lower - v_upper

        if count <= 0:
            continue
        if count == 1:
            intervals.append(interval)
            continue
        if depth >= max_depth:
            warnings.warn(
                f"root_isolation: dropped interval "
                f"({interval.lower}, {interval.upper}] holding {count} roots "
                f"after {max_depth} bisections",
                RuntimeWarning,
                stacklevel=2,
            )
            continue

        c = _split_point(p, interval, tol)
        v_c = variations(c)
        left, right = interval.bisect(at=c)

        # Pushed right first so the left half is popped first
        stack.append((right, v_c, v_upper, depth + 1))
        stack.append((left, v_lower, v_c, depth + 1))

    return intervals
