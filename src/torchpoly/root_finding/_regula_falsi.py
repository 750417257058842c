"""Regula falsi (false position) method for bracketed scalar roots."""

from typing import Callable

import torch
from torch import Tensor

from ._bisection import _bracket, _endpoint_root
from ._convergence import check_convergence, resolve_tolerances
from ._interval import Interval


def regula_falsi(
    f: Callable[[Tensor], Tensor],
    interval: Interval,
    *,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
    maxiter: int = 500,
    dtype: torch.dtype = torch.float64,
) -> Tensor | None:
    """
    Find a root of f(x) = 0 inside an interval by the false position method.

    Each step replaces one endpoint by the zero of the secant through
    ``(a, f(a))`` and ``(b, f(b))``

    .. math::

        c = \\frac{a f(b) - b f(a)}{f(b) - f(a)}

    keeping a sign change between the endpoints.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Scalar function, called with 0-d tensors.
    interval : Interval
        Bracket. An endpoint is only returned as a root if the interval
        contains it.
    xtol, rtol : float, optional
        Convergence on the iterate: ``|c_new - c_old| < xtol + rtol * |c_new|``.
        Default: dtype-aware.
    ftol : float, optional
        Convergence on the residual: ``|f(c)| < ftol``. Default: dtype-aware.
    maxiter : int, default=500
        Maximum iterations.
    dtype : torch.dtype, default=torch.float64
        Dtype of the iterates.

    Returns
    -------
    Tensor or None
        Root estimate as a 0-d tensor, or ``None`` if the endpoints do not
        bracket a sign change or the iteration does not converge.

    Raises
    ------
    BracketError
        If the interval is empty or has non-finite endpoints.

    Examples
    --------
    >>> f = lambda x: x**3 - x - 2
    >>> root = regula_falsi(f, Interval(1.0, 2.0))
    >>> float(root)  # doctest: +ELLIPSIS
    1.52137...
    """
    xtol, rtol, ftol = resolve_tolerances(dtype, xtol, rtol, ftol)

    a, b, fa, fb = _bracket(f, interval, dtype)

    endpoint = _endpoint_root(interval, a, b, fa, fb, ftol)
    if endpoint is not None:
        return endpoint

    if float(fa) * float(fb) >= 0:
        return None

    c_old = a
    for _ in range(maxiter):
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)

        if check_convergence(c_old, c, fc, xtol, rtol, ftol):
            return c

        if (float(fc) < 0) == (float(fa) < 0):
            a, fa = c, fc
        else:
            b, fb = c, fc
        c_old = c

    return None
