"""Shared symbol datatypes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolEntry:
    """One catalog record: a symbol name plus its search aliases.

    ``name`` is the identity key and display value. ``search_tokens`` are used
    only for matching and are kept exactly as the data source provides them.
    """

    name: str
    search_tokens: tuple[str, ...] = ()
