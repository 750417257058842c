"""Convergence utilities for root finding."""

import math

import torch
from torch import Tensor


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys 'xtol', 'rtol', 'ftol'.
    """
    if dtype in (torch.float16, torch.bfloat16):
        return {"xtol": 1e-3, "rtol": 1e-2, "ftol": 1e-3}
    elif dtype == torch.float32:
        return {"xtol": 1e-6, "rtol": 1e-5, "ftol": 1e-6}
    else:  # float64 and others
        return {"xtol": 1e-12, "rtol": 1e-9, "ftol": 1e-12}


def resolve_tolerances(
    dtype: torch.dtype,
    xtol: float | None,
    rtol: float | None,
    ftol: float | None,
) -> tuple[float, float, float]:
    """Fill unset tolerances from :func:`default_tolerances`."""
    defaults = default_tolerances(dtype)
    return (
        defaults["xtol"] if xtol is None else xtol,
        defaults["rtol"] if rtol is None else rtol,
        defaults["ftol"] if ftol is None else ftol,
    )


def check_convergence(
    x_old: Tensor,
    x_new: Tensor,
    f_new: Tensor,
    xtol: float,
    rtol: float,
    ftol: float,
) -> bool:
    """Check convergence of a scalar iteration.

    Convergence is achieved when EITHER:
    - |x_new - x_old| < xtol + rtol * |x_new| (x converged)
    - |f_new| < ftol (f converged)

    Parameters
    ----------
    x_old : Tensor
        Previous iterate (0-d).
    x_new : Tensor
        Current iterate (0-d).
    f_new : Tensor
        Function value at the current iterate (0-d).
    xtol : float
        Absolute tolerance on x.
    rtol : float
        Relative tolerance on x.
    ftol : float
        Tolerance on function value.

    Returns
    -------
    bool
        True if the iteration has converged.
    """
    x_converged = abs(float(x_new - x_old)) < xtol + rtol * abs(float(x_new))
    f_converged = abs(float(f_new)) < ftol
    return x_converged or f_converged


def is_finite(*values: float) -> bool:
    """Return True if every value is finite."""
    return all(math.isfinite(v) for v in values)
