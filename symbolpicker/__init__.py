"""Public package surface for symbolpicker.

Re-exports the catalog loader, resource providers, ranking functions and the
picker session, plus ``main`` for running the command line from Python.
"""

from __future__ import annotations

from .catalog import CatalogLoader, build_catalog
from .errors import ResourceUnavailable, SymbolPickerError
from .picker import SymbolPicker
from .ranking import match_score, prioritize, rank, rank_with_scores
from .resources import InMemoryResourceProvider, PlistResourceProvider, ResourceProvider
from .top_symbols import DEFAULT_TOP_SYMBOLS
from .types import SymbolEntry


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "CatalogLoader",
    "DEFAULT_TOP_SYMBOLS",
    "InMemoryResourceProvider",
    "PlistResourceProvider",
    "ResourceProvider",
    "ResourceUnavailable",
    "SymbolEntry",
    "SymbolPicker",
    "SymbolPickerError",
    "build_catalog",
    "main",
    "match_score",
    "prioritize",
    "rank",
    "rank_with_scores",
]
