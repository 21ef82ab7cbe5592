"""Cache protocol for the repository layer (DIP)."""

from collections.abc import Callable
from typing import Protocol, TypeVar

T = TypeVar("T")


class RepositoryCacheProtocol(Protocol[T]):
    """Per-kind store of materialized lists, keyed by view name."""

    kind: str

    def get(self, view: str) -> list[T] | None:
        """Return the cached list for view, or None if the view was never loaded."""
        ...

    def replace(self, view: str, items: list[T]) -> None:
        """Replace the whole view and mark it initialized."""
        ...

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first cached item (any loaded view) matching predicate."""
        ...

    def clear(self) -> None:
        """Drop every view."""
        ...
