"""
unitalg.core.coefficient
========================

Numeric scale factors attached to unit expressions.

A coefficient is either ``Exact`` (a :class:`~unitalg.core.rational.Rational`)
or ``Float`` (an approximate ``float``). Arithmetic stays exact while both
operands are exact and degrades to ``Float`` as soon as either side is
approximate:

    Exact * Exact -> Exact
    Exact * Float -> Float
    Float * Exact -> Float
    Float * Float -> Float
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeAlias, Union

from unitalg.core.rational import ONE, Rational


def _float_div(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor gives inf/nan instead of raising."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass(frozen=True, slots=True)
class Exact:
    value: Rational

    def is_unit(self) -> bool:
        return self.value.is_one

    def as_float(self) -> float:
        return self.value.to_float()

    def __mul__(self, other: Coefficient) -> Coefficient:
        if isinstance(other, Exact):
            return Exact(self.value * other.value)
        if isinstance(other, Float):
            return Float(self.value * other.value)
        return NotImplemented

    def __truediv__(self, other: Coefficient) -> Coefficient:
        if isinstance(other, Exact):
            # zero-valued divisor raises ZeroDivisionError from Rational
            return Exact(self.value / other.value)
        if isinstance(other, Float):
            return Float(_float_div(self.value.to_float(), other.value))
        return NotImplemented

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Float:
    value: float

    def is_unit(self) -> bool:
        # never the identity, even at 1.0
        return False

    def as_float(self) -> float:
        return self.value

    def __mul__(self, other: Coefficient) -> Coefficient:
        if isinstance(other, Exact):
            return Float(self.value * other.value)
        if isinstance(other, Float):
            return Float(self.value * other.value)
        return NotImplemented

    def __truediv__(self, other: Coefficient) -> Coefficient:
        if isinstance(other, Exact):
            if other.value.numerator == 0:
                raise ZeroDivisionError("Cannot divide by a zero-valued Rational.")
            return Float(self.value / other.value)
        if isinstance(other, Float):
            return Float(_float_div(self.value, other.value))
        return NotImplemented

    def __str__(self) -> str:
        return repr(self.value)


Coefficient: TypeAlias = Union[Exact, Float]


def unit() -> Exact:
    """The multiplicative identity, ``Exact(1/1)``."""
    return Exact(ONE)


def exact(numerator: int, denominator: int = 1) -> Exact:
    return Exact(Rational(numerator, denominator))


def multiply(lhs: Coefficient, rhs: Coefficient) -> Coefficient:
    return lhs * rhs


def divide(lhs: Coefficient, rhs: Coefficient) -> Coefficient:
    return lhs / rhs


__all__ = ["Coefficient", "Exact", "Float", "unit", "exact", "multiply", "divide"]
