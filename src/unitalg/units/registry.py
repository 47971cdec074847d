"""
unitalg.units.registry
======================

The unit registry: a read-only mapping from unit name to resolved
:class:`~unitalg.core.expr.UnitExpr`, plus the conversion entry point.

- `build_registry` turns an ordered table of definition lines into a
  registry. Each line may refer to names declared above it; redefining a
  name overwrites the earlier entry.
- `convert` answers "how many ``a`` make one ``b``" by dividing the two
  expressions and splitting off the coefficient.
- `get_default_registry` builds (once) the registry for the built-in table,
  optionally extended by the file named in :class:`UnitsSettings`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional

import structlog

from unitalg.config.logging import ensure_logging
from unitalg.config.settings import UnitsSettings
from unitalg.core.coefficient import Coefficient
from unitalg.core.expr import Ratio, UnitExpr, factor_out_coef
from unitalg.core.unit_simplifier import divide
from unitalg.exceptions import UnknownUnitError
from unitalg.units.definitions import DEFINITIONS
from unitalg.units.parser import parse_definition

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry(Mapping[str, UnitExpr]):
    """Read-only name -> expression mapping.

    The registry is populated once by `build_registry` and never changes
    afterwards; lookups hand out the stored (immutable) expressions.
    """

    def __init__(self, units: Optional[Mapping[str, UnitExpr]] = None) -> None:
        self._units: Dict[str, UnitExpr] = dict(units or {})

    def __getitem__(self, name: str) -> UnitExpr:
        try:
            return self._units[name]
        except KeyError:
            raise UnknownUnitError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __repr__(self) -> str:
        return f"UnitsRegistry({len(self)} units)"

    # -------------------------- public API ---------------------------------
    def lookup(self, name: str) -> UnitExpr:
        """Lookup a unit by name. Raises `UnknownUnitError` if unknown.

        ``get`` keeps the plain Mapping behaviour and returns a default.
        """
        return self[name]

    def has(self, name: str) -> bool:
        return name in self._units

    def all(self) -> Mapping[str, UnitExpr]:
        return dict(self._units)

    def convert(self, name_a: str, name_b: str) -> "Conversion":
        return convert(self, name_a, name_b)


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------
def build_registry(lines: Optional[Iterable[str]] = None) -> UnitsRegistry:
    """Parse definition ``lines`` (the built-in table by default) into a registry.

    Undefined references are logged and dropped; malformed numerals abort
    with `DefinitionError` (or `ZeroDivisionError` for ``p|0``).
    """
    ensure_logging()
    if lines is None:
        lines = DEFINITIONS

    units: Dict[str, UnitExpr] = {}
    for lineno, line in enumerate(lines, start=1):
        parsed = parse_definition(line, units, lineno)
        if parsed is None:
            continue
        name, expr = parsed
        if name in units:
            log.debug("unit_redefined", unit=name, old=str(units[name]), new=str(expr))
        units[name] = expr

    log.debug("registry_built", units=len(units))
    return UnitsRegistry(units)


def load_definitions(path: "str | Path") -> List[str]:
    """Read a definitions file into lines, ready for `build_registry`."""
    return Path(path).read_text(encoding="utf-8").splitlines()


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------
class Conversion(NamedTuple):
    """Result of `convert`.

    ``leftover`` is the symbolic part that did not cancel, or ``None`` when
    the two units are commensurate.
    """

    coefficient: Coefficient
    leftover: Optional[UnitExpr]

    @property
    def factor(self) -> float:
        return self.coefficient.as_float()

    @property
    def is_commensurate(self) -> bool:
        return self.leftover is None


def convert(registry: Mapping[str, UnitExpr], name_a: str, name_b: str) -> Conversion:
    """
    Ratio of unit ``name_b`` to unit ``name_a``.

    ``convert(reg, "cm", "inch")`` gives a coefficient of 2.54. Incompatible
    units are not rejected; whatever does not cancel is returned as the
    leftover so the caller can decide.
    """
    for name in (name_a, name_b):
        if name not in registry:
            raise UnknownUnitError(name)

    result = divide(registry[name_b], registry[name_a])
    coefficient, rest = factor_out_coef(result)
    if isinstance(rest, Ratio) and rest.is_dimensionless:
        return Conversion(coefficient, None)
    return Conversion(coefficient, rest)


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------
def _default_lines(settings: UnitsSettings) -> List[str]:
    lines = list(DEFINITIONS)
    if settings.definitions_path is not None:
        lines.extend(load_definitions(settings.definitions_path))
    return lines


@lru_cache(maxsize=None)
def _cached_registry(settings: UnitsSettings) -> UnitsRegistry:
    return build_registry(_default_lines(settings))


def get_default_registry(settings: Optional[UnitsSettings] = None) -> UnitsRegistry:
    """Shared registry for the built-in table (built on first use)."""
    settings = settings or UnitsSettings()
    ensure_logging(settings)
    return _cached_registry(settings)


__all__ = [
    "UnitsRegistry",
    "Conversion",
    "build_registry",
    "load_definitions",
    "convert",
    "get_default_registry",
]
