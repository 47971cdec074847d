"""
unitalg: symbolic unit algebra and conversion ratios.

unitalg parses a table of unit definitions into a registry of symbolic unit
expressions and combines them by multiplication and division, cancelling
shared atoms, to find the scale factor between two units.
This module exposes a minimal, stable public API. The default registry is
built lazily to avoid import-time side effects and circular imports.
"""

from importlib import metadata as _metadata


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("unitalg")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitalg.units.registry import UnitsRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from unitalg.units.registry import get_default_registry  # local import
    return get_default_registry()

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'u' builds the default registry on
    first use.
    """
    if name == "u":
        return _get_default_registry()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["u"])
