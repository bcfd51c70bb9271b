"""Resource providers supplying the three symbol tables.

A provider answers three lookups: the name-availability key set, the explicit
display order, and the search-token table. Each lookup raises
``ResourceUnavailable`` when its table is missing or malformed; the catalog
loader turns that into an empty catalog.
"""

from __future__ import annotations

import os
import plistlib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from .errors import ResourceUnavailable

NAME_AVAILABILITY = "name_availability"
SYMBOL_ORDER = "symbol_order"
SYMBOL_SEARCH = "symbol_search"

RESOURCES_ENV_VAR = "SYMBOLPICKER_RESOURCES"
CORE_GLYPHS_RESOURCES = Path("/System/Library/CoreServices/CoreGlyphs.bundle/Contents/Resources")


class ResourceProvider(Protocol):
    """Capability that supplies the three tables a catalog is built from."""

    def has_tables(self) -> bool: ...

    def availability_names(self) -> set[str]: ...

    def display_order(self) -> list[str]: ...

    def search_tokens(self) -> dict[str, list[str]]: ...


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _availability_keys(table: str, raw: object) -> set[str]:
    """Extract availability names from ``{"symbols": {name: version}}``."""
    if not isinstance(raw, dict):
        raise ResourceUnavailable(table, "expected a dictionary")
    symbols = raw.get("symbols")
    if not isinstance(symbols, dict):
        raise ResourceUnavailable(table, "missing 'symbols' dictionary")
    if not all(isinstance(name, str) and isinstance(value, str) for name, value in symbols.items()):
        raise ResourceUnavailable(table, "'symbols' must map strings to strings")
    return set(symbols)


def _order_list(table: str, raw: object) -> list[str]:
    if not _is_string_list(raw):
        raise ResourceUnavailable(table, "expected an array of strings")
    return list(raw)


def _token_table(table: str, raw: object) -> dict[str, list[str]]:
    if not isinstance(raw, dict):
        raise ResourceUnavailable(table, "expected a dictionary")
    tokens: dict[str, list[str]] = {}
    for name, aliases in raw.items():
        if not isinstance(name, str) or not _is_string_list(aliases):
            raise ResourceUnavailable(table, "values must be arrays of strings")
        tokens[name] = list(aliases)
    return tokens


class PlistResourceProvider:
    """Read the tables from ``<name>.plist`` files in one directory.

    This matches the layout of the CoreGlyphs bundle, so pointing it at
    ``CORE_GLYPHS_RESOURCES`` on macOS yields the system symbol catalog.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def table_path(self, table: str) -> Path:
        return self.directory / f"{table}.plist"

    def _read(self, table: str) -> object:
        path = self.table_path(table)
        try:
            with path.open("rb") as handle:
                return plistlib.load(handle)
        except FileNotFoundError as exc:
            raise ResourceUnavailable(table, f"not found at {path}") from exc
        except Exception as exc:
            raise ResourceUnavailable(table, f"unreadable: {exc}") from exc

    def has_tables(self) -> bool:
        """Return whether every table file parses and has the expected shape.

        Each table is read independently; nothing is cached.
        """
        try:
            self.availability_names()
            self.display_order()
            self.search_tokens()
        except ResourceUnavailable:
            return False
        return True

    def availability_names(self) -> set[str]:
        return _availability_keys(NAME_AVAILABILITY, self._read(NAME_AVAILABILITY))

    def display_order(self) -> list[str]:
        return _order_list(SYMBOL_ORDER, self._read(SYMBOL_ORDER))

    def search_tokens(self) -> dict[str, list[str]]:
        return _token_table(SYMBOL_SEARCH, self._read(SYMBOL_SEARCH))


class InMemoryResourceProvider:
    """Serve tables from Python objects; ``None`` models an absent table."""

    def __init__(
        self,
        availability: Iterable[str] | None = None,
        order: Iterable[str] | None = None,
        tokens: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self._availability = None if availability is None else set(availability)
        self._order = None if order is None else list(order)
        self._tokens = None if tokens is None else {name: list(aliases) for name, aliases in tokens.items()}

    def has_tables(self) -> bool:
        return self._availability is not None and self._order is not None and self._tokens is not None

    def availability_names(self) -> set[str]:
        if self._availability is None:
            raise ResourceUnavailable(NAME_AVAILABILITY)
        return set(self._availability)

    def display_order(self) -> list[str]:
        if self._order is None:
            raise ResourceUnavailable(SYMBOL_ORDER)
        return list(self._order)

    def search_tokens(self) -> dict[str, list[str]]:
        if self._tokens is None:
            raise ResourceUnavailable(SYMBOL_SEARCH)
        return {name: list(aliases) for name, aliases in self._tokens.items()}


def default_resource_dir(configured: Path | None = None) -> Path:
    """Resolve the resource directory: env override, then config, then CoreGlyphs."""
    override = os.environ.get(RESOURCES_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    if configured is not None:
        return configured
    return CORE_GLYPHS_RESOURCES
