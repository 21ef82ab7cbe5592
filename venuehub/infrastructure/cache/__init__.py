"""Process-local repository cache (one entry per kind and view)."""

from venuehub.infrastructure.cache.cache_protocol import RepositoryCacheProtocol
from venuehub.infrastructure.cache.repository_cache import (
    VIEW_ACTIVE,
    VIEW_ALL,
    CacheEntry,
    RepositoryCache,
)

__all__ = [
    "VIEW_ACTIVE",
    "VIEW_ALL",
    "CacheEntry",
    "RepositoryCache",
    "RepositoryCacheProtocol",
]
