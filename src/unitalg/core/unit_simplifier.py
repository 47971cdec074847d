"""Combination and cancellation of unit expressions.

``multiply`` and ``divide`` are the only ways two expressions are combined.
Both follow the same pipeline:

1. factor each operand into ``(coefficient, bare expression)``;
2. view bare atoms as one-element ratios;
3. concatenate atom lists (dividing swaps the right-hand lists);
4. cancel equal atoms between numerator and denominator;
5. combine the coefficients with the same operation;
6. rebuild through :func:`~unitalg.core.expr.make_scaled`.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from unitalg.core.coefficient import Coefficient
from unitalg.core.expr import Basic, Ratio, UnitExpr, as_ratio, factor_out_coef, make_scaled


def _find_pair(numerator: Sequence[Basic], denominator: Sequence[Basic]) -> Tuple[int, int] | None:
    for ni, n in enumerate(numerator):
        for di, d in enumerate(denominator):
            if n == d:
                return ni, di
    return None


def cancel_units(
    numerator: Sequence[Basic], denominator: Sequence[Basic]
) -> Tuple[Tuple[Basic, ...], Tuple[Basic, ...]]:
    """
    Remove matching atoms from both sides until none are left.

    The scan always restarts from the front: numerator index ascending, then
    the first matching denominator index. Which pair goes first only shows up
    in the display order of what remains, but keeping the scan fixed makes
    that output reproducible. Each pass removes two atoms, so the loop ends.
    """
    num: List[Basic] = list(numerator)
    den: List[Basic] = list(denominator)
    while True:
        pair = _find_pair(num, den)
        if pair is None:
            break
        ni, di = pair
        del num[ni]
        del den[di]
    return tuple(num), tuple(den)


def _combine(
    lhs: UnitExpr,
    rhs: UnitExpr,
    op: Callable[[Coefficient, Coefficient], Coefficient],
    invert: bool,
) -> UnitExpr:
    lc, le = factor_out_coef(lhs)
    rc, re_ = factor_out_coef(rhs)
    left, right = as_ratio(le), as_ratio(re_)

    if invert:
        num = left.numerator + right.denominator
        den = left.denominator + right.numerator
    else:
        num = left.numerator + right.numerator
        den = left.denominator + right.denominator

    num, den = cancel_units(num, den)
    # coefficient is computed independently of the atom cancellation
    return make_scaled(op(lc, rc), Ratio(num, den))


def multiply(lhs: UnitExpr, rhs: UnitExpr) -> UnitExpr:
    """Product of two unit expressions, with shared atoms cancelled."""
    return _combine(lhs, rhs, lambda a, b: a * b, invert=False)


def divide(lhs: UnitExpr, rhs: UnitExpr) -> UnitExpr:
    """Quotient ``lhs / rhs``: multiply by the reciprocal of ``rhs``."""
    return _combine(lhs, rhs, lambda a, b: a / b, invert=True)


__all__ = ["cancel_units", "multiply", "divide"]
