from ._bisection import bisection
from ._convergence import check_convergence, default_tolerances
from ._exceptions import BracketError, RootFindingError
from ._interval import Bound, Interval
from ._newton_raphson import newton_raphson
from ._real_polynomial import (
    RealRoots,
    cauchy_bound,
    coefficient_sign_changes,
    cubic_roots,
    find_roots,
    lagrange_bound,
    number_distinct_roots,
    number_sign_variations,
    quadratic_roots,
    root_isolation,
    sign_changes,
    sign_variations,
    sturm_sequence,
)
from ._regula_falsi import regula_falsi

__all__ = [
    "bisection",
    "cauchy_bound",
    "check_convergence",
    "coefficient_sign_changes",
    "cubic_roots",
    "default_tolerances",
    "find_roots",
    "lagrange_bound",
    "newton_raphson",
    "number_distinct_roots",
    "number_sign_variations",
    "quadratic_roots",
    "regula_falsi",
    "root_isolation",
    "sign_changes",
    "sign_variations",
    "sturm_sequence",
    "Bound",
    "BracketError",
    "Interval",
    "RealRoots",
    "RootFindingError",
]
