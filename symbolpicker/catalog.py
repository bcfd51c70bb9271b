"""Catalog assembly and the once-per-loader symbol cache."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Iterable, Mapping, Sequence

from .errors import ResourceUnavailable
from .resources import ResourceProvider
from .types import SymbolEntry

logger = logging.getLogger(__name__)

Catalog = tuple[SymbolEntry, ...]


def build_catalog(
    availability: Iterable[str],
    order: Sequence[str],
    tokens: Mapping[str, Sequence[str]],
) -> Catalog:
    """Merge the explicit order with the unordered remainder and attach tokens.

    The order list is kept as the prefix (first occurrence wins on repeats).
    Available names missing from it follow, sorted lexicographically.
    """
    seen: set[str] = set()
    names: list[str] = []
    for name in order:
        if name in seen:
            continue
        seen.add(name)
        names.append(name)
    names.extend(sorted(set(availability) - seen))
    return tuple(SymbolEntry(name=name, search_tokens=tuple(tokens.get(name, ()))) for name in names)


class CatalogLoader:
    """Load the symbol catalog once and serve it from memory afterwards.

    Loads are single-flight: concurrent callers wait on one lock, and only the
    first one to find the cache empty touches the provider. Failed loads return
    an empty catalog and leave the cache empty so the next call retries.
    """

    def __init__(self, provider: ResourceProvider) -> None:
        self.provider = provider
        self._cache: Catalog | None = None
        self._lock = threading.Lock()
        self._warmup_lock = threading.Lock()
        self._warming = False

    def is_available(self) -> bool:
        """Report whether all three tables are present; never loads them."""
        try:
            return bool(self.provider.has_tables())
        except OSError:
            return False

    @property
    def is_loaded(self) -> bool:
        return self._cache is not None

    def get_all_symbols(self) -> Catalog:
        cached = self._cache
        if cached is not None:
            return cached

        with self._lock:
            if self._cache is not None:
                return self._cache
            logger.debug("loading symbol catalog")
            try:
                availability = self.provider.availability_names()
                order = self.provider.display_order()
                tokens = self.provider.search_tokens()
            except ResourceUnavailable as exc:
                logger.debug("symbol catalog unavailable: %s", exc)
                return ()
            catalog = build_catalog(availability, order, tokens)
            logger.info("loaded %d symbols", len(catalog))
            self._cache = catalog
            return catalog

    async def load_async(self) -> Catalog:
        """Await the catalog without blocking the running event loop."""
        cached = self._cache
        if cached is not None:
            return cached
        return await asyncio.to_thread(self.get_all_symbols)

    def _warmup_worker(self) -> None:
        try:
            self.get_all_symbols()
        finally:
            with self._warmup_lock:
                self._warming = False

    def warm_up(self) -> threading.Thread | None:
        """Start a best-effort background load.

        Returns the started thread, or ``None`` when the catalog is already
        cached or a warmup is still running.
        """
        if self._cache is not None:
            return None
        with self._warmup_lock:
            if self._warming:
                return None
            self._warming = True

        worker = threading.Thread(
            target=self._warmup_worker,
            name="symbolpicker-catalog",
            daemon=True,
        )
        worker.start()
        return worker
