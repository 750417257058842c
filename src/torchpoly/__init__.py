"""torchpoly: PyTorch polynomials and real polynomial root finding."""

from . import (
    polynomial,
    root_finding,
)

__all__ = [
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"
