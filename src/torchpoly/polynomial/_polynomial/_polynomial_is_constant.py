from ._polynomial import Polynomial


def polynomial_is_constant(p: Polynomial) -> bool:
    """Check whether ``p`` has degree 0 (the zero polynomial included)."""
    return p.coeffs.shape[-1] == 1
