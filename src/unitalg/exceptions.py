"""Exceptions raised by unitalg."""

from __future__ import annotations


class DefinitionError(ValueError):
    """A definition-table line could not be parsed."""

    def __init__(self, message: str, line: str, lineno: int | None = None) -> None:
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}{message} in {line!r}")
        self.message = message
        self.line = line
        self.lineno = lineno


class UnknownUnitError(KeyError):
    """Requested unit name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown unit symbol: {self.name}"


__all__ = ["DefinitionError", "UnknownUnitError"]
