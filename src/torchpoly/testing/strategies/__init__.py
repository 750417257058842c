"""Hypothesis strategies for polynomial testing."""

from ._integers_as_floats import integers_as_floats
from ._polynomial_roots import integer_roots, separated_roots
from ._polynomials import polynomials
from ._real_numbers import real_numbers

__all__ = [
    # Numeric strategies
    "integers_as_floats",
    "real_numbers",
    # Polynomial strategies
    "integer_roots",
    "polynomials",
    "separated_roots",
]
