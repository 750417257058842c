from dataclasses import dataclass, field
from typing import Callable, Dict

import torch

from torchpoly.polynomial._polynomial import Polynomial, polynomial


@dataclass
class OrthogonalPolynomialCache:
    """Memo of orthogonal polynomials in power basis, keyed by order.

    Pass the same cache to repeated generator calls to reuse previously
    computed polynomials. Every order up to the largest requested one is
    stored, since the three-term recurrences need all of them.

    Attributes
    ----------
    chebyshev_t : dict[int, Polynomial]
        Chebyshev polynomials of the first kind.
    chebyshev_u : dict[int, Polynomial]
        Chebyshev polynomials of the second kind.
    legendre_p : dict[int, Polynomial]
        Legendre polynomials.
    """

    chebyshev_t: Dict[int, Polynomial] = field(default_factory=dict)
    chebyshev_u: Dict[int, Polynomial] = field(default_factory=dict)
    legendre_p: Dict[int, Polynomial] = field(default_factory=dict)

    def clear(self):
        """Drop all cached polynomials."""
        self.chebyshev_t.clear()
        self.chebyshev_u.clear()
        self.legendre_p.clear()


def _three_term(
    table: Dict[int, Polynomial],
    n: int,
    first: tuple[list[float], list[float]],
    step: Callable[[int, Polynomial, Polynomial], Polynomial],
    dtype: torch.dtype,
) -> Polynomial:
    # Fill table[0..n] with p_{k+1} = step(k, p_k, p_{k-1})
    if n < 0:
        raise ValueError(f"Order must be non-negative, got {n}")

    if 0 not in table:
        table[0] = polynomial(torch.tensor(first[0], dtype=dtype))
    if n >= 1 and 1 not in table:
        table[1] = polynomial(torch.tensor(first[1], dtype=dtype))

    for k in range(1, n):
        if k + 1 not in table:
            table[k + 1] = step(k, table[k], table[k - 1])

    return table[n]
