"""Bisection method for bracketed scalar roots."""

from typing import Callable

import torch
from torch import Tensor

from ._convergence import is_finite, resolve_tolerances
from ._exceptions import BracketError
from ._interval import Interval


def _bracket(
    f: Callable[[Tensor], Tensor],
    interval: Interval,
    dtype: torch.dtype,
) -> tuple[Tensor, Tensor, Tensor, Tensor]:
    if not is_finite(interval.lower, interval.upper):
        raise BracketError(
            f"Interval endpoints must be finite, got "
            f"({interval.lower}, {interval.upper})"
        )
    if interval.is_empty():
        raise BracketError(
            f"Interval ({interval.lower}, {interval.upper}) is empty"
        )

    a = torch.tensor(interval.lower, dtype=dtype)
    b = torch.tensor(interval.upper, dtype=dtype)
    return a, b, f(a), f(b)


def _endpoint_root(
    interval: Interval,
    a: Tensor,
    b: Tensor,
    fa: Tensor,
    fb: Tensor,
    ftol: float,
) -> Tensor | None:
    # Endpoints excluded by the boundary flags never count as roots
    if abs(float(fa)) < ftol and interval.contains(a):
        return a
    if abs(float(fb)) < ftol and interval.contains(b):
        return b
    return None


def bisection(
    f: Callable[[Tensor], Tensor],
    interval: Interval,
    *,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
    maxiter: int = 200,
    dtype: torch.dtype = torch.float64,
) -> Tensor | None:
    """
    Find a root of f(x) = 0 inside an interval by bisection.

    The interval is halved, keeping the half whose endpoints have function
    values of opposite sign, until the bracket is small enough or the
    residual vanishes. Convergence is linear but guaranteed.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Scalar function, called with 0-d tensors. A ``Polynomial``
        qualifies. Must be continuous on the interval.
    interval : Interval
        Bracket. An endpoint is only returned as a root if the interval
        contains it.
    xtol : float, optional
        Absolute tolerance on the bracket width. Convergence requires
        ``|b - a| < xtol + rtol * |b|``. Default: dtype-aware (1e-12 for
        float64).
    rtol : float, optional
        Relative tolerance on the bracket width. Default: dtype-aware.
    ftol : float, optional
        Tolerance on the residual ``|f(x)|``. Default: dtype-aware.
    maxiter : int, default=200
        Maximum number of halvings.
    dtype : torch.dtype, default=torch.float64
        Dtype of the iterates.

    Returns
    -------
    Tensor or None
        Root estimate as a 0-d tensor. An endpoint that belongs to the
        interval and whose residual is within ``ftol`` is returned directly.
        ``None`` if ``f(lower)`` and ``f(upper)`` have the same sign, or if
        ``maxiter`` halvings do not converge.

    Raises
    ------
    BracketError
        If the interval is empty or has non-finite endpoints.

    Examples
    --------
    >>> f = lambda x: x**2 - 2
    >>> root = bisection(f, Interval(1.0, 2.0))
    >>> float(root)  # doctest: +ELLIPSIS
    1.414...
    """
    xtol, rtol, ftol = resolve_tolerances(dtype, xtol, rtol, ftol)

    a, b, fa, fb = _bracket(f, interval, dtype)

    endpoint = _endpoint_root(interval, a, b, fa, fb, ftol)
    if endpoint is not None:
        return endpoint

    if float(fa) * float(fb) >= 0:
        return None

    for _ in range(maxiter):
        mid = (a + b) / 2
        fm = f(mid)

        if abs(float(fm)) < ftol or abs(float(b - a)) < xtol + rtol * abs(
            float(b)
        ):
            return mid

        if (float(fm) < 0) == (float(fa) < 0):
            a, fa = mid, fm
        else:
            b = mid

    return None
