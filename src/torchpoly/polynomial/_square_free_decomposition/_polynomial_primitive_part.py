from torchpoly.polynomial._polynomial import Polynomial, polynomial_scale

from ._polynomial_content import polynomial_content


def polynomial_primitive_part(
    p: Polynomial,
    tol: float | None = None,
) -> Polynomial | None:
    """Divide an integer polynomial by its content.

    Returns ``None`` for non-integer input. The zero polynomial is returned
    unchanged.
    """
    content = polynomial_content(p, tol)
    if content is None:
        return None
    if content == 0:
        return p

    return polynomial_scale(p, 1.0 / content)
