import warnings

import torch

from torchpoly.polynomial import (
    Polynomial,
    polynomial_is_constant,
    yun_algorithm,
)
from torchpoly.root_finding._bisection import bisection

from ._real_roots import RealRoots
from ._root_isolation import root_isolation


def find_roots(
    p: Polynomial,
    *,
    tol: float | None = None,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
    max_depth: int = 100,
) -> RealRoots:
    """Find all distinct real roots of a polynomial with multiplicities.

    The polynomial is split into square-free factors by
    :func:`yun_algorithm`; the roots of each factor are isolated by Sturm
    sequences and refined by bisection. A root of the ``i``-th factor
    (1-based) has multiplicity ``i``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, optional
        Polynomial tolerance (square-free tests, Sturm sign evaluation).
        Default: policy epsilon of the coefficient dtype.
    xtol, rtol, ftol : float, optional
        Bisection tolerances. Default: dtype-aware.
    max_depth : int, default=100
        Isolation depth cap, see :func:`root_isolation`.

    Returns
    -------
    RealRoots
        ``(roots, multiplicities)``. Roots are ordered by multiplicity
        first, then ascending. Empty if ``p`` is constant, has no real
        roots, or has repeated roots but non-integer coefficients (a
        ``RuntimeWarning`` is issued in the last case).

    Examples
    --------
    >>> p = polynomial_from_roots([-2.0, -1.0, 1.0, 5.0, 5.0, 5.0])
    >>> roots, multiplicities = find_roots(p)
    >>> multiplicities
    tensor([1, 1, 1, 3])
    """
    dtype = p.coeffs.dtype

    factors = yun_algorithm(p, tol=tol)
    if factors is None:
        warnings.warn(
            "find_roots: polynomial has repeated roots but non-integer "
            "coefficients, no square-free decomposition available",
            RuntimeWarning,
            stacklevel=2,
        )
        factors = []

    roots = []
    multiplicities = []
    for i, q in enumerate(factors):
        if polynomial_is_constant(q):
            continue

        for interval in root_isolation(q, max_depth=max_depth, tol=tol):
            root = bisection(
                q,
                interval,
                xtol=xtol,
                rtol=rtol,
                ftol=ftol,
                dtype=dtype,
            )
            if root is None:
                warnings.warn(
                    f"find_roots: bisection failed on isolating interval "
                    f"({interval.lower}, {interval.upper}]",
                    RuntimeWarning,
                    stacklevel=2,
                )
                continue

            roots.append(root)
            multiplicities.append(i + 1)

    if roots:
        roots = torch.stack(roots)
    else:
        roots = torch.empty(0, dtype=dtype)

    return RealRoots(
        roots=roots,
        multiplicities=torch.tensor(multiplicities, dtype=torch.int64),
    )
