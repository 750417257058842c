from numbers import Number
from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. Polynomials built with
        :func:`polynomial` (and every arithmetic function) are trimmed:
        the leading coefficient is never nearly zero unless the polynomial
        is the constant zero.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        polynomial([1.0, 2.0, 3.0])

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        2.5 * p  # polynomial_scale(p, 2.5)
        p / 2.0  # polynomial_scale(p, 0.5)
        -p       # polynomial_negate(p)
        p ** 3   # polynomial_pow(p, 3)
        p // q   # polynomial_div(p, q)
        p % q    # polynomial_mod(p, q)
        divmod(p, q)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __add__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, _as_polynomial(other, self))

    def __radd__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(_as_polynomial(other, self), self)

    def __sub__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, _as_polynomial(other, self))

    def __rsub__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(_as_polynomial(other, self), self)

    def __mul__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        return polynomial_scale(self, other)

    def __rmul__(self, other: Union["Polynomial", Number, Tensor]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(other, self)
        return polynomial_scale(self, other)

    def __truediv__(self, other: Union[Number, Tensor]) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_scale(self, 1.0 / other)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __call__(self, x: Union[Number, Tensor]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __pow__(self, n: int) -> "Polynomial":
        from ._polynomial_pow import polynomial_pow

        return polynomial_pow(self, n)

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_div import polynomial_div

        return polynomial_div(self, _as_polynomial(other, self))

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_mod import polynomial_mod

        return polynomial_mod(self, _as_polynomial(other, self))

    def __divmod__(self, other: "Polynomial") -> tuple["Polynomial", "Polynomial"]:
        from ._polynomial_divmod import polynomial_divmod

        return polynomial_divmod(self, _as_polynomial(other, self))


def polynomial(
    coeffs: Union[Tensor, Sequence[float]],
    *,
    tol: float | None = None,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (N,). Must have at least one
        coefficient. Sequences and integer tensors become ``torch.float64``;
        floating tensors keep their dtype.
    tol : float, optional
        Trimming tolerance. Default: the policy epsilon of the dtype.

    Returns
    -------
    Polynomial
        Trimmed polynomial owning a copy of the coefficients.

    Raises
    ------
    PolynomialError
        If coeffs is empty or not one-dimensional.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.], dtype=torch.float64)
    >>> polynomial([1.0, 2.0, 0.0, 0.0]).coeffs  # trailing zeros trimmed
    tensor([1., 2.], dtype=torch.float64)
    """
    if not isinstance(coeffs, Tensor):
        coeffs = torch.as_tensor(coeffs, dtype=torch.float64)
    elif not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.float64)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    from ._polynomial_trim import polynomial_trim

    return polynomial_trim(
        Polynomial(coeffs=coeffs.detach().clone()),
        tol=tol,
    )


def _as_polynomial(
    value: Union[Polynomial, Number, Tensor],
    like: Polynomial,
) -> Polynomial:
    # Scalars become constant polynomials with the dtype of ``like``.
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, Tensor):
        return polynomial(value.reshape(1).to(like.coeffs.dtype))
    return polynomial(torch.tensor([value], dtype=like.coeffs.dtype))
