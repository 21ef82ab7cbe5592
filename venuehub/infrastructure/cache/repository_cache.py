"""In-memory cache of materialized entity lists.

One RepositoryCache exists per entity kind and lives as long as its repository
(i.e. the process). It holds one CacheEntry per view: "all", "active", and
any extra named views a repository defines (e.g. one per hero image slot).

The cache is not locked. Two refreshes of the same view that overlap may
complete in either order; the one finishing last wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

VIEW_ALL = "all"
VIEW_ACTIVE = "active"


@dataclass
class CacheEntry(Generic[T]):
    """Materialized list for one (kind, view) and whether it was ever loaded."""

    kind: str
    view: str
    items: list[T] = field(default_factory=list)
    initialized: bool = False


class RepositoryCache(Generic[T]):
    """Per-kind cache of views. Items are only replaced wholesale."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: dict[str, CacheEntry[T]] = {}

    def entry(self, view: str) -> CacheEntry[T]:
        existing = self._entries.get(view)
        if existing is None:
            existing = CacheEntry(kind=self.kind, view=view)
            self._entries[view] = existing
        return existing

    def is_initialized(self, view: str) -> bool:
        return self.entry(view).initialized

    def get(self, view: str) -> list[T] | None:
        entry = self.entry(view)
        if not entry.initialized:
            return None
        return list(entry.items)

    def replace(self, view: str, items: list[T]) -> None:
        entry = self.entry(view)
        entry.items = list(items)
        entry.initialized = True
        logger.debug("Cached %d %s (%s view)", len(items), self.kind, view)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        for entry in self._entries.values():
            if not entry.initialized:
                continue
            for item in entry.items:
                if predicate(item):
                    return item
        return None

    def clear(self) -> None:
        self._entries.clear()
