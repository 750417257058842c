from torch import Tensor

from ._polynomial import Polynomial


def polynomial_leading_coefficient(p: Polynomial) -> Tensor:
    """Return the coefficient of the highest power as a 0-d tensor."""
    return p.coeffs[-1]
