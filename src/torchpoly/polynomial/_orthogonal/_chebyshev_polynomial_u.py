import torch

from torchpoly.polynomial._polynomial import Polynomial

from ._chebyshev_polynomial_t import _chebyshev_step
from ._orthogonal_polynomial_cache import OrthogonalPolynomialCache, _three_term


def chebyshev_polynomial_u(
    n: int,
    *,
    cache: OrthogonalPolynomialCache | None = None,
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Chebyshev polynomial of the second kind in power basis.

    Uses ``U_0 = 1``, ``U_1 = 2x`` and the first-kind recurrence
    ``U_{n+1} = 2x U_n - U_{n-1}``. ``U_n(cos(t)) sin(t) = sin((n+1) t)``.

    Examples
    --------
    >>> chebyshev_polynomial_u(2).coeffs  # U_2 = 4x^2 - 1
    tensor([-1.,  0.,  4.], dtype=torch.float64)
    """
    if cache is None:
        cache = OrthogonalPolynomialCache()

    return _three_term(
        cache.chebyshev_u, n, ([1.0], [0.0, 2.0]), _chebyshev_step, dtype
    )
