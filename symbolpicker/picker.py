"""Picker session state shared between the catalog core and a presentation layer.

The session owns the current query, the selected name, the full catalog in
source order, and the prioritized default view. Renderers read
``visible_symbols``; input handlers call ``set_query`` and ``select``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .catalog import CatalogLoader
from .ranking import normalize_query, prioritize, rank
from .top_symbols import DEFAULT_TOP_SYMBOLS
from .types import SymbolEntry


class SymbolPicker:
    """State-bound picker operations used by front ends."""

    def __init__(
        self,
        loader: CatalogLoader,
        top_symbols: Sequence[str] = DEFAULT_TOP_SYMBOLS,
        selection: str = "",
        on_select: Callable[[str], None] | None = None,
    ) -> None:
        self.loader = loader
        self.top_symbols = tuple(top_symbols)
        self.selection = selection
        self.on_select = on_select
        self.query = ""
        self.all_symbols: list[SymbolEntry] = []
        self.default_symbols: list[SymbolEntry] = []
        self.visible_symbols: list[SymbolEntry] = []
        self.message = ""
        self.loaded = False
        self.dismissed = False

    def load(self) -> None:
        """Fetch the catalog and build the prioritized default view."""
        self.all_symbols = list(self.loader.get_all_symbols())
        self.default_symbols = prioritize(self.all_symbols, self.top_symbols)
        self.loaded = True
        self.refresh_visible()

    def refresh_visible(self) -> None:
        """Recompute ``visible_symbols`` from the full catalog and current query."""
        if not normalize_query(self.query):
            self.visible_symbols = list(self.default_symbols)
        else:
            self.visible_symbols = rank(self.query, self.all_symbols)

        if self.visible_symbols:
            self.message = ""
        elif not self.all_symbols:
            self.message = " symbols unavailable"
        else:
            self.message = " no matching symbols"

    def set_query(self, text: str) -> None:
        self.query = text
        self.refresh_visible()

    def is_selected(self, name: str) -> bool:
        return self.selection == name

    def select(self, name: str) -> bool:
        """Select ``name``, dismiss the picker, and notify the callback.

        Returns ``False`` without side effects when ``name`` is not a catalog
        entry.
        """
        if not any(entry.name == name for entry in self.all_symbols):
            return False
        self.selection = name
        self.dismissed = True
        if self.on_select is not None:
            self.on_select(name)
        return True

    def visible_names(self) -> list[str]:
        return [entry.name for entry in self.visible_symbols]
