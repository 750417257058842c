from ._degree_error import DegreeError
from ._euclidean_algorithm import euclidean, extended_euclidean
from ._numeric_policy import NumericPolicy, numeric_policy
from ._orthogonal import (
    OrthogonalPolynomialCache,
    chebyshev_nodes,
    chebyshev_polynomial_t,
    chebyshev_polynomial_u,
    legendre_polynomial_p,
)
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_antiderivative,
    polynomial_compose,
    polynomial_constant,
    polynomial_degree,
    polynomial_derivative,
    polynomial_div,
    polynomial_divmod,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_from_roots,
    polynomial_has_root,
    polynomial_has_roots,
    polynomial_integral,
    polynomial_is_constant,
    polynomial_is_integer,
    polynomial_is_zero,
    polynomial_lagrange_basis,
    polynomial_lagrange_interpolation,
    polynomial_leading_coefficient,
    polynomial_mod,
    polynomial_monomial,
    polynomial_multiply,
    polynomial_negate,
    polynomial_normalize,
    polynomial_one,
    polynomial_pow,
    polynomial_scale,
    polynomial_subtract,
    polynomial_to_integer,
    polynomial_trim,
    polynomial_zero,
)
from ._polynomial_error import PolynomialError
from ._square_free_decomposition import (
    from_square_free_decomposition,
    is_square_free,
    polynomial_content,
    polynomial_primitive_part,
    yun_algorithm,
)

__all__ = [
    # Power basis
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
    # Numeric policy
    "NumericPolicy",
    "numeric_policy",
    # Euclidean algorithm
    "euclidean",
    "extended_euclidean",
    # Square-free decomposition
    "from_square_free_decomposition",
    "is_square_free",
    "polynomial_content",
    "polynomial_primitive_part",
    "yun_algorithm",
    # Orthogonal polynomials
    "OrthogonalPolynomialCache",
    "chebyshev_nodes",
    "chebyshev_polynomial_t",
    "chebyshev_polynomial_u",
    "legendre_polynomial_p",
    # Exceptions
    "DegreeError",
    "PolynomialError",
]
