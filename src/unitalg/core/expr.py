"""
unitalg.core.expr
=================

Symbolic unit expressions.

An expression is one of three immutable variants:

- ``Basic``  -- an atomic unit symbol such as ``cm``.
- ``Ratio``  -- a product of atoms over a product of atoms. Repeated atoms
  stand for powers (``cm cm cm`` is a volume).
- ``Scaled`` -- a coefficient multiplying a bare ``Basic`` or ``Ratio``.

``Scaled`` values are only ever built through :func:`make_scaled`, which
drops identity coefficients and folds nested coefficients together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TypeAlias, Union

from unitalg.core.coefficient import Coefficient, unit


class _ExprOps:
    """Operator sugar shared by every expression variant."""

    __slots__ = ()

    def __mul__(self, other: "UnitExpr") -> "UnitExpr":
        from unitalg.core.unit_simplifier import multiply  # local import (cycle)

        if not isinstance(other, (Basic, Ratio, Scaled)):
            return NotImplemented
        return multiply(self, other)  # type: ignore[arg-type]

    def __truediv__(self, other: "UnitExpr") -> "UnitExpr":
        from unitalg.core.unit_simplifier import divide  # local import (cycle)

        if not isinstance(other, (Basic, Ratio, Scaled)):
            return NotImplemented
        return divide(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Basic(_ExprOps):
    """Atomic unit symbol. Two atoms are the same unit iff their names match."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Ratio(_ExprOps):
    numerator: Tuple[Basic, ...] = ()
    denominator: Tuple[Basic, ...] = ()

    def __post_init__(self) -> None:
        # accept lists from callers but store tuples so the value stays hashable
        object.__setattr__(self, "numerator", tuple(self.numerator))
        object.__setattr__(self, "denominator", tuple(self.denominator))

    @property
    def is_dimensionless(self) -> bool:
        return not self.numerator and not self.denominator

    def __str__(self) -> str:
        if self.numerator:
            parts = [b.name for b in self.numerator]
        elif self.denominator:
            # an empty numerator would otherwise read like a parse error
            parts = ["1"]
        else:
            parts = []
        if self.denominator:
            parts.append("/")
            parts.extend(b.name for b in self.denominator)
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Scaled(_ExprOps):
    coefficient: Coefficient
    expr: Union[Basic, Ratio]

    def __str__(self) -> str:
        inner = str(self.expr)
        return f"{self.coefficient} {inner}" if inner else str(self.coefficient)


UnitExpr: TypeAlias = Union[Basic, Ratio, Scaled]


def make_scaled(coefficient: Coefficient, expr: UnitExpr) -> UnitExpr:
    """
    Attach ``coefficient`` to ``expr``.

    This is the only place a ``Scaled`` is built. An identity coefficient
    returns ``expr`` untouched, and a ``Scaled`` argument has its coefficient
    multiplied in so the result never nests.
    """
    if isinstance(expr, Scaled):
        coefficient = expr.coefficient * coefficient
        expr = expr.expr
    if coefficient.is_unit():
        return expr
    return Scaled(coefficient, expr)


def factor_out_coef(expr: UnitExpr) -> tuple[Coefficient, Union[Basic, Ratio]]:
    """Split ``expr`` into ``(coefficient, bare expression)``."""
    if isinstance(expr, Scaled):
        return expr.coefficient, expr.expr
    return unit(), expr


def as_ratio(expr: Union[Basic, Ratio]) -> Ratio:
    if isinstance(expr, Basic):
        return Ratio((expr,), ())
    return expr


__all__ = [
    "Basic",
    "Ratio",
    "Scaled",
    "UnitExpr",
    "make_scaled",
    "factor_out_coef",
    "as_ratio",
]
