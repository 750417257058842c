from typing import NamedTuple

from torch import Tensor


class RealRoots(NamedTuple):
    """Real roots of a polynomial together with their multiplicities.

    Parameters
    ----------
    roots : Tensor
        Distinct real roots, shape ``(K,)``, in the coefficient dtype.
    multiplicities : Tensor
        Multiplicity of each root, shape ``(K,)``, ``int64`` and ``>= 1``.
    """

    roots: Tensor
    multiplicities: Tensor
