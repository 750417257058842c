import torch
import torch.nn.functional

from torchpoly.polynomial._polynomial import Polynomial, polynomial

from ._orthogonal_polynomial_cache import OrthogonalPolynomialCache, _three_term


def _times_x(p: Polynomial) -> torch.Tensor:
    return torch.nn.functional.pad(p.coeffs, (1, 0))


def _chebyshev_step(k: int, p_k: Polynomial, p_km1: Polynomial) -> Polynomial:
    # 2*x*p_k - p_{k-1}
    return polynomial(
        2.0 * _times_x(p_k)
        - torch.nn.functional.pad(p_km1.coeffs, (0, 2))
    )


def chebyshev_polynomial_t(
    n: int,
    *,
    cache: OrthogonalPolynomialCache | None = None,
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Chebyshev polynomial of the first kind in power basis.

    Parameters
    ----------
    n : int
        Order, non-negative.
    cache : OrthogonalPolynomialCache, optional
        Memo shared across calls. Without one, every call starts afresh.
    dtype : torch.dtype, default=torch.float64
        Coefficient dtype.

    Returns
    -------
    Polynomial
        ``T_n`` of degree ``n``.

    Notes
    -----
    Uses the recurrence relation:
        T_0(x) = 1
        T_1(x) = x
        T_{n+1}(x) = 2*x*T_n(x) - T_{n-1}(x)

    ``T_n(cos(t)) = cos(n t)``, and the roots of ``T_n`` are the Chebyshev
    nodes.

    Examples
    --------
    >>> chebyshev_polynomial_t(2).coeffs  # T_2 = 2x^2 - 1
    tensor([-1.,  0.,  2.], dtype=torch.float64)
    """
    if cache is None:
        cache = OrthogonalPolynomialCache()

    return _three_term(
        cache.chebyshev_t, n, ([1.0], [0.0, 1.0]), _chebyshev_step, dtype
    )
