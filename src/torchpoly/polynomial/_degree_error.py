from torchpoly.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when degree is invalid for operation.

    The typical case is Euclidean division by the zero polynomial, whose
    degree is undefined.
    """

    pass
