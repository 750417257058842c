from ._from_square_free_decomposition import from_square_free_decomposition
from ._is_square_free import is_square_free
from ._polynomial_content import polynomial_content
from ._polynomial_primitive_part import polynomial_primitive_part
from ._yun_algorithm import yun_algorithm

__all__ = [
    "from_square_free_decomposition",
    "is_square_free",
    "polynomial_content",
    "polynomial_primitive_part",
    "yun_algorithm",
]
