import math

import torch
from torch import Tensor


def chebyshev_nodes(
    n: int,
    interval=None,
    *,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Roots of the Chebyshev polynomial ``T_n``.

    Parameters
    ----------
    n : int
        Number of nodes, non-negative.
    interval : Interval, optional
        Target interval; the nodes ``cos((2k - 1) pi / (2n))``,
        ``k = 1, ..., n``, are mapped affinely from ``[-1, 1]`` onto
        ``[interval.lower, interval.upper]``. Default: ``[-1, 1]``.
    dtype : torch.dtype, default=torch.float64
        Output dtype.

    Returns
    -------
    Tensor
        Nodes, shape (n,), in descending order on ``[-1, 1]``.

    Examples
    --------
    >>> chebyshev_nodes(2)
    tensor([ 0.7071, -0.7071], dtype=torch.float64)
    """
    if n < 0:
        raise ValueError(f"Number of nodes must be non-negative, got {n}")

    k = torch.arange(1, n + 1, dtype=dtype)
    nodes = torch.cos((2 * k - 1) * math.pi / (2 * max(n, 1)))

    if interval is None:
        return nodes

    a, b = interval.lower, interval.upper
    return (b - a) / 2 * nodes + (a + b) / 2
