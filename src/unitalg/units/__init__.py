from unitalg.units.definitions import DEFINITIONS
from unitalg.units.registry import (
    Conversion,
    UnitsRegistry,
    build_registry,
    convert,
    get_default_registry,
    load_definitions,
)

__all__ = [
    "DEFINITIONS",
    "Conversion",
    "UnitsRegistry",
    "build_registry",
    "convert",
    "get_default_registry",
    "load_definitions",
]
