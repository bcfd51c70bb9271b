"""Exception types raised by resource providers."""

from __future__ import annotations


class SymbolPickerError(Exception):
    """Base class for symbolpicker errors."""


class ResourceUnavailable(SymbolPickerError):
    """A required resource table is missing or has the wrong shape."""

    def __init__(self, table: str, reason: str = "missing") -> None:
        super().__init__(f"{table}: {reason}")
        self.table = table
        self.reason = reason
