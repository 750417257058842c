"""Newton-Raphson iteration for scalar roots."""

from numbers import Number
from typing import Callable, Union

import torch
from torch import Tensor

from ._convergence import check_convergence, resolve_tolerances


def newton_raphson(
    f: Callable[[Tensor], Tensor],
    df: Callable[[Tensor], Tensor],
    x0: Union[Number, Tensor],
    *,
    maxiter: int = 100,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
) -> Tensor | None:
    """
    Find a root of f(x) = 0 by Newton-Raphson iteration.

    Iterates ``x <- x - f(x) / f'(x)`` from ``x0``. Convergence is
    quadratic near a simple root but not guaranteed globally.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Scalar function, called with 0-d tensors.
    df : Callable[[Tensor], Tensor]
        Derivative of ``f``. For a polynomial ``p`` pass
        ``polynomial_derivative(p)``.
    x0 : Number or Tensor
        Initial guess. Python numbers become ``torch.float64``.
    maxiter : int, default=100
        Maximum iterations.
    xtol, rtol : float, optional
        Step convergence ``|x_new - x| < xtol + rtol * |x_new|``.
        Default: dtype-aware.
    ftol : float, optional
        Residual convergence ``|f(x)| < ftol``. Default: dtype-aware.

    Returns
    -------
    Tensor or None
        Root estimate as a 0-d tensor. ``None`` if the derivative becomes
        too small (below ``10 * finfo(dtype).eps`` in magnitude) or the
        iteration does not converge within ``maxiter`` steps.

    Examples
    --------
    >>> f = lambda x: x**2 - 2
    >>> df = lambda x: 2 * x
    >>> float(newton_raphson(f, df, 1.1))  # doctest: +ELLIPSIS
    1.414213...
    """
    if isinstance(x0, Tensor):
        x = x0.detach().reshape(())
        if not x.is_floating_point():
            x = x.to(torch.float64)
    else:
        x = torch.tensor(x0, dtype=torch.float64)

    xtol, rtol, ftol = resolve_tolerances(x.dtype, xtol, rtol, ftol)
    eps = torch.finfo(x.dtype).eps * 10

    fx = f(x)
    if abs(float(fx)) < ftol:
        return x

    for _ in range(maxiter):
        dfx = df(x)
        if abs(float(dfx)) < eps:
            return None

        x_new = x - fx / dfx
        fx = f(x_new)

        if check_convergence(x, x_new, fx, xtol, rtol, ftol):
            return x_new

        x = x_new

    return None
