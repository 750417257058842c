from ._cauchy_bound import cauchy_bound
from ._cubic_roots import cubic_roots
from ._find_roots import find_roots
from ._lagrange_bound import lagrange_bound
from ._number_distinct_roots import number_distinct_roots
from ._quadratic_roots import quadratic_roots
from ._real_roots import RealRoots
from ._root_isolation import root_isolation
from ._sign_changes import coefficient_sign_changes, sign_changes
from ._sign_variations import number_sign_variations, sign_variations
from ._sturm_sequence import sturm_sequence

__all__ = [
    "RealRoots",
    "cauchy_bound",
    "coefficient_sign_changes",
    "cubic_roots",
    "find_roots",
    "lagrange_bound",
    "number_distinct_roots",
    "number_sign_variations",
    "quadratic_roots",
    "root_isolation",
    "sign_changes",
    "sign_variations",
    "sturm_sequence",
]
