"""Exact polynomial arithmetic over ``fractions.Fraction``.

Coefficient lists are ascending and trimmed: no trailing zeros, and the
zero polynomial is ``[Fraction(0)]``.
"""

from fractions import Fraction

import torch

from torchpoly.polynomial._polynomial import Polynomial, polynomial


def to_rational(p: Polynomial) -> list[Fraction]:
    """Round the coefficients of an integer polynomial to exact integers."""
    return trim([Fraction(round(float(c))) for c in p.coeffs.tolist()])


def from_rational(
    coeffs: list[Fraction],
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    return polynomial(
        torch.tensor([float(c) for c in coeffs], dtype=dtype)
    )


def trim(coeffs: list[Fraction]) -> list[Fraction]:
    coeffs = list(coeffs)
    while len(coeffs) > 1 and coeffs[-1] == 0:
        coeffs.pop()
    if not coeffs:
        return [Fraction(0)]
    return coeffs


def is_zero(coeffs: list[Fraction]) -> bool:
    return len(coeffs) == 1 and coeffs[0] == 0


def subtract(a: list[Fraction], b: list[Fraction]) -> list[Fraction]:
    n = max(len(a), len(b))
    a = a + [Fraction(0)] * (n - len(a))
    b = b + [Fraction(0)] * (n - len(b))
    return trim([x - y for x, y in zip(a, b)])


def scale(a: list[Fraction], c: Fraction) -> list[Fraction]:
    return trim([x * c for x in a])


def multiply(a: list[Fraction], b: list[Fraction]) -> list[Fraction]:
    out = [Fraction(0)] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            out[i + j] += x * y
    return trim(out)


def derivative(a: list[Fraction]) -> list[Fraction]:
    if len(a) <= 1:
        return [Fraction(0)]
    return trim([k * a[k] for k in range(1, len(a))])


def divmod_(
    a: list[Fraction], b: list[Fraction]
) -> tuple[list[Fraction], list[Fraction]]:
    if is_zero(b):
        raise ZeroDivisionError("polynomial division by zero")

    if len(a) < len(b):
        return [Fraction(0)], list(a)

    remainder = list(a)
    quotient = [Fraction(0)] * (len(a) - len(b) + 1)
    for k in range(len(a) - len(b), -1, -1):
        ratio = remainder[k + len(b) - 1] / b[-1]
        quotient[k] = ratio
        for j, y in enumerate(b):
            remainder[k + j] -= ratio * y

    return trim(quotient), trim(remainder[: len(b) - 1])


def monic(a: list[Fraction]) -> list[Fraction]:
    if is_zero(a):
        return a
    return scale(a, 1 / a[-1])


def gcd(a: list[Fraction], b: list[Fraction]) -> list[Fraction]:
    """Monic greatest common divisor, zero only if both inputs are zero."""
    while not is_zero(b):
        a, b = b, divmod_(a, b)[1]
    return monic(a)
