from ._chebyshev_nodes import chebyshev_nodes
from ._chebyshev_polynomial_t import chebyshev_polynomial_t
from ._chebyshev_polynomial_u import chebyshev_polynomial_u
from ._legendre_polynomial_p import legendre_polynomial_p
from ._orthogonal_polynomial_cache import OrthogonalPolynomialCache

__all__ = [
    "OrthogonalPolynomialCache",
    "chebyshev_nodes",
    "chebyshev_polynomial_t",
    "chebyshev_polynomial_u",
    "legendre_polynomial_p",
]
