import torch
import torch.nn.functional

from torchpoly.polynomial._polynomial import Polynomial, polynomial

from ._orthogonal_polynomial_cache import OrthogonalPolynomialCache, _three_term


def _legendre_step(k: int, p_k: Polynomial, p_km1: Polynomial) -> Polynomial:
    # ((2k+1)*x*P_k - k*P_{k-1}) / (k+1)
    x_p_k = torch.nn.functional.pad(p_k.coeffs, (1, 0))
    p_km1 = torch.nn.functional.pad(p_km1.coeffs, (0, 2))
    return polynomial(((2 * k + 1) * x_p_k - k * p_km1) / (k + 1))


def legendre_polynomial_p(
    n: int,
    *,
    cache: OrthogonalPolynomialCache | None = None,
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Legendre polynomial in power basis.

    Parameters
    ----------
    n : int
        Order, non-negative.
    cache : OrthogonalPolynomialCache, optional
        Memo shared across calls.
    dtype : torch.dtype, default=torch.float64
        Coefficient dtype.

    Returns
    -------
    Polynomial
        ``P_n`` of degree ``n``, normalized so that ``P_n(1) = 1``.

    Notes
    -----
    Bonnet's recursion:
        P_0(x) = 1
        P_1(x) = x
        (n+1) P_{n+1}(x) = (2n+1) x P_n(x) - n P_{n-1}(x)

    Examples
    --------
    >>> legendre_polynomial_p(2).coeffs  # (3x^2 - 1) / 2
    tensor([-0.5000,  0.0000,  1.5000], dtype=torch.float64)
    """
    if cache is None:
        cache = OrthogonalPolynomialCache()

    return _three_term(
        cache.legendre_p, n, ([1.0], [0.0, 1.0]), _legendre_step, dtype
    )
