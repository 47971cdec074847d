from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Mapping, NamedTuple, Optional, Tuple

import structlog

from unitalg.core.coefficient import Coefficient, Exact, Float, unit
from unitalg.core.expr import Basic, Ratio, Scaled, UnitExpr, make_scaled
from unitalg.core.rational import Rational
from unitalg.exceptions import DefinitionError

log = structlog.get_logger(__name__)

FUNDAMENTAL = "!"
COMMENT = "#"

_FRACTION_RE = re.compile(r"(?P<num>\d+)\|(?P<den>\d+)")
_INTEGER_RE = re.compile(r"\d+")
_DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?(?:[eE][-+]?\d+)?")
_POWER_RE = re.compile(r"(?P<base>[^^]*)\^(?P<exp>.*)")


# --- Plan type ------------------------------------------------------
class DefinitionPlan(NamedTuple):
    """A parsed definition line, before any registry lookups."""

    name: str
    fundamental: bool = False
    coefficient: Optional[Coefficient] = None
    refs: Tuple[str, ...] = ()


# ---------------- Parser that builds a PLAN (no registry lookups!) ----------------
class _DefinitionParser:
    """
    Grammar (whitespace separated):
      line   := NAME body? ['#' comment]?
      body   := '!' | coef? ref*
      coef   := INT | INT '|' INT | DECIMAL
      ref    := NAME ['^' INT]?
    """

    def __init__(self, text: str):
        self.s = text
        self.tokens = text.split(COMMENT, 1)[0].split()

    def parse(self) -> Optional[DefinitionPlan]:
        if not self.tokens:
            return None  # blank or comment-only
        name, body = self.tokens[0], self.tokens[1:]
        if not body:
            raise DefinitionError(f"Missing definition for {name!r}", self.s)
        if body == [FUNDAMENTAL]:
            return DefinitionPlan(name, fundamental=True)

        coefficient = None
        if body[0][0].isdigit():
            coefficient = self._parse_coefficient(body[0])
            body = body[1:]

        refs: List[str] = []
        for tok in body:
            refs.extend(self._expand_power(tok))
        return DefinitionPlan(name, coefficient=coefficient, refs=tuple(refs))

    # ---- token helpers ----
    def _parse_coefficient(self, tok: str) -> Coefficient:
        m = _FRACTION_RE.fullmatch(tok)
        if m:
            # a zero denominator raises ZeroDivisionError from Rational
            return Exact(Rational(int(m.group("num")), int(m.group("den"))))
        if _INTEGER_RE.fullmatch(tok):
            return Exact(Rational(int(tok)))
        if _DECIMAL_RE.fullmatch(tok):
            return Float(float(tok))
        raise DefinitionError(f"Malformed numeric literal {tok!r}", self.s)

    def _expand_power(self, tok: str) -> List[str]:
        m = _POWER_RE.fullmatch(tok)
        if not m:
            return [tok]
        base, exp = m.group("base"), m.group("exp")
        if not base or not _INTEGER_RE.fullmatch(exp):
            raise DefinitionError(f"Expected 'name^integer', got {tok!r}", self.s)
        return [base] * int(exp)


# Cache the *compiled plan* only. Safe across registries because there's no bound objects inside.
@lru_cache(maxsize=4096)
def _compile_definition(line: str) -> Optional[DefinitionPlan]:
    return _DefinitionParser(line).parse()


def compile_definition(line: str, lineno: int | None = None) -> Optional[DefinitionPlan]:
    """Parse one table line into a plan; ``None`` for blank or comment lines."""
    try:
        return _compile_definition(line)
    except DefinitionError as e:
        if lineno is None:
            raise
        raise DefinitionError(e.message, line, lineno) from None


# ---------------- Evaluation of a plan against a given registry ----------------
def resolve_reference(expr: UnitExpr) -> Tuple[Coefficient, List[Basic]]:
    """
    Flatten a registered expression into ``(coefficient, numerator atoms)``.

    Denominator atoms of a referenced ratio are not carried through.
    """
    if isinstance(expr, Basic):
        return unit(), [expr]
    if isinstance(expr, Ratio):
        if expr.denominator:
            log.warning(
                "denominator_dropped",
                expr=str(expr),
                dropped=[b.name for b in expr.denominator],
            )
        return unit(), list(expr.numerator)
    if isinstance(expr, Scaled):
        coef, atoms = resolve_reference(expr.expr)
        return expr.coefficient * coef, atoms
    raise TypeError(f"Not a unit expression: {expr!r}")


def evaluate_definition(plan: DefinitionPlan, units: Mapping[str, UnitExpr]) -> UnitExpr:
    """Resolve ``plan`` against ``units`` (the entries defined so far)."""
    if plan.fundamental:
        return Basic(plan.name)

    coef: Coefficient = unit()
    atoms: List[Basic] = []
    for ref in plan.refs:
        if ref not in units:
            log.warning("undefined_reference", unit=plan.name, reference=ref)
            continue
        ref_coef, ref_atoms = resolve_reference(units[ref])
        coef = coef * ref_coef
        atoms.extend(ref_atoms)

    # the line's own coefficient goes in last
    if plan.coefficient is not None:
        coef = coef * plan.coefficient
    return make_scaled(coef, Ratio(tuple(atoms), ()))


def parse_definition(
    line: str, units: Mapping[str, UnitExpr], lineno: int | None = None
) -> Optional[Tuple[str, UnitExpr]]:
    """
    Parse and resolve a single definition line.

    Returns ``(name, expression)``, or ``None`` for lines with no definition.
    Raises ``DefinitionError`` for malformed numerals or powers and
    ``ZeroDivisionError`` for a ``p|0`` coefficient.
    """
    plan = compile_definition(line, lineno)
    if plan is None:
        return None
    return plan.name, evaluate_definition(plan, units)


__all__ = [
    "DefinitionPlan",
    "compile_definition",
    "resolve_reference",
    "evaluate_definition",
    "parse_definition",
]
