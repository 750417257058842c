from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_compose import polynomial_compose
from ._polynomial_constant import (
    polynomial_constant,
    polynomial_one,
    polynomial_zero,
)
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_div import polynomial_div
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_has_root import polynomial_has_root, polynomial_has_roots
from ._polynomial_integral import polynomial_integral
from ._polynomial_is_constant import polynomial_is_constant
from ._polynomial_is_integer import polynomial_is_integer
from ._polynomial_is_zero import polynomial_is_zero
from ._polynomial_lagrange_basis import polynomial_lagrange_basis
from ._polynomial_lagrange_interpolation import polynomial_lagrange_interpolation
from ._polynomial_leading_coefficient import polynomial_leading_coefficient
from ._polynomial_mod import polynomial_mod
from ._polynomial_monomial import polynomial_monomial
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_normalize import polynomial_normalize
from ._polynomial_pow import polynomial_pow
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_to_integer import polynomial_to_integer
from ._polynomial_trim import polynomial_trim

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_antiderivative",
    "polynomial_compose",
    "polynomial_constant",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_has_root",
    "polynomial_has_roots",
    "polynomial_integral",
    "polynomial_is_constant",
    "polynomial_is_integer",
    "polynomial_is_zero",
    "polynomial_lagrange_basis",
    "polynomial_lagrange_interpolation",
    "polynomial_leading_coefficient",
    "polynomial_mod",
    "polynomial_monomial",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_normalize",
    "polynomial_one",
    "polynomial_pow",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_to_integer",
    "polynomial_trim",
    "polynomial_zero",
]
