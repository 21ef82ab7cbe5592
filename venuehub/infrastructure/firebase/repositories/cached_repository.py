"""Generic Firestore repository with a per-process list cache.

Every content kind (hero slides, testimonials, weddings, ...) is a
CachedFirestoreRepository configured by a RepositoryConfig: collection,
ordering, materializer and timestamp field names. Reads are served from the
RepositoryCache once a view is loaded; every successful write clears the
cache and reloads the full list before returning, so the writer always reads
its own write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from venuehub.core.constants import (
    FIELD_CREATED_ON,
    FIELD_ORDER,
    FIELD_STATUS,
    FIELD_UPDATED_ON,
    STATUS_ACTIVE,
)
from venuehub.domain.exceptions import (
    ResourceNotFoundException,
    StoreFailureException,
    ValidationException,
)
from venuehub.infrastructure.cache import (
    VIEW_ACTIVE,
    VIEW_ALL,
    RepositoryCache,
    RepositoryCacheProtocol,
)
from venuehub.infrastructure.firebase._rest_client import (
    DESCENDING,
    DocumentNotFoundError,
    FirestoreError,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from venuehub.shared.telemetry import add_span_attributes, traced

logger = logging.getLogger(__name__)

T = TypeVar("T")

Filter = tuple[str, str, Any]

# Errors raised while turning a raw document into a result object.
_MATERIALIZE_ERRORS = (KeyError, TypeError, ValueError)


@dataclass(frozen=True)
class RepositoryConfig(Generic[T]):
    """Static description of one cached entity kind.

    Attributes:
        collection: Firestore collection id.
        kind: Human label used in logs and error messages ('hero slide').
        materialize: (doc_id, data) -> result object.
        order_by: Canonical ordering as (field, direction) pairs.
        created_field / updated_field: Timestamp field names.
        default_status: Status written on create when none is given.
        immutable_fields: Stripped from update payloads.
        base_filters: Filters every query, point read and write must satisfy.
    """

    collection: str
    kind: str
    materialize: Callable[[str, dict[str, Any]], T]
    order_by: tuple[tuple[str, str], ...] = ((FIELD_CREATED_ON, DESCENDING),)
    created_field: str = FIELD_CREATED_ON
    updated_field: str = FIELD_UPDATED_ON
    default_status: str | None = STATUS_ACTIVE
    immutable_fields: frozenset[str] = field(default_factory=lambda: frozenset({"id"}))
    base_filters: tuple[Filter, ...] = ()


def _matches(data: dict[str, Any], filters: tuple[Filter, ...]) -> bool:
    """Client-side check of equality/membership filters on a point read."""
    for name, op, value in filters:
        current = data.get(name)
        if op == "==" and current != value:
            return False
        if op == "in" and current not in value:
            return False
    return True


class CachedFirestoreRepository(Generic[T]):
    """Cached CRUD repository for one Firestore collection."""

    def __init__(
        self,
        client: FirestoreRESTClient,
        config: RepositoryConfig[T],
        cache: RepositoryCacheProtocol[T] | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._coll = client.collection(config.collection)
        self._cache: RepositoryCacheProtocol[T] = cache or RepositoryCache(config.kind)

    @property
    def kind(self) -> str:
        return self._config.kind

    @property
    def cache(self) -> RepositoryCacheProtocol[T]:
        return self._cache

    def _build_query(self, filters: tuple[Filter, ...] = (), order_by=None):
        # A filter on a base-filtered field replaces the base filter for that field.
        narrowed = {name for name, _, _ in filters}
        base = tuple(f for f in self._config.base_filters if f[0] not in narrowed)
        query = self._coll
        for name, op, value in (*base, *filters):
            query = query.where(name, op, value)
        for name, direction in order_by if order_by is not None else self._config.order_by:
            query = query.order_by(name, direction)
        return query

    async def _query_store(
        self,
        filters: tuple[Filter, ...] = (),
        order_by: tuple[tuple[str, str], ...] | None = None,
    ) -> list[T]:
        """Run a query and materialize every document; nothing is cached here."""
        materialize = self._config.materialize
        try:
            return [
                materialize(snapshot.id, snapshot.to_dict())
                async for snapshot in self._build_query(filters, order_by).stream()
            ]
        except (FirestoreError, *_MATERIALIZE_ERRORS) as e:
            logger.exception("Failed to fetch %s", self.kind)
            raise StoreFailureException("fetch", self.kind) from e

    async def _cached_view(
        self, view: str, filters: tuple[Filter, ...], force_refresh: bool
    ) -> list[T]:
        cached = self._cache.get(view)
        if cached is not None and not force_refresh:
            logger.debug("Returning cached %s (%s view, %d items)", self.kind, view, len(cached))
            add_span_attributes(**{"cache.hit": True, "cache.kind": self.kind})
            return cached
        logger.debug("Refreshing %s (%s view)", self.kind, view)
        items = await self._query_store(filters)
        # Only reached when the query and materialization both succeeded.
        self._cache.replace(view, items)
        add_span_attributes(
            **{"cache.hit": False, "cache.kind": self.kind, "result.count": len(items)}
        )
        return items

    @traced("repository.get_all")
    async def get_all(self, force_refresh: bool = False) -> list[T]:
        """Return every entity in canonical order (cached unless forced or never loaded)."""
        return await self._cached_view(VIEW_ALL, (), force_refresh)

    async def get_by_id(self, entity_id: str) -> T | None:
        """Return entity from any loaded view, else a single point read.

        A miss never triggers a list refresh.
        """
        cached = self._cache.find(lambda item: getattr(item, "id", None) == entity_id)
        if cached is not None:
            return cached
        try:
            snapshot = await self._coll.document(entity_id).get()
            if snapshot is None:
                return None
            data = snapshot.to_dict()
            if not _matches(data, self._config.base_filters):
                return None
            return self._config.materialize(snapshot.id, data)
        except (FirestoreError, *_MATERIALIZE_ERRORS) as e:
            logger.exception("Failed to fetch %s %s", self.kind, entity_id)
            raise StoreFailureException("fetch", self.kind) from e

    async def require(self, entity_id: str) -> T:
        """get_by_id that raises ResourceNotFoundException on a miss."""
        found = await self.get_by_id(entity_id)
        if found is None:
            raise ResourceNotFoundException(self.kind, entity_id)
        return found

    async def _require_in_scope(self, entity_id: str) -> None:
        # Documents sharing the collection but failing base_filters are not ours to write.
        if self._config.base_filters:
            await self.require(entity_id)

    async def invalidate_and_refresh(self) -> list[T]:
        """Drop every view and reload the full list before returning."""
        self._cache.clear()
        return await self.get_all(force_refresh=True)

    def _create_payload(self, data: dict[str, Any]) -> dict[str, Any]:
        cfg = self._config
        payload = {
            k: v
            for k, v in data.items()
            if k not in ("id", cfg.created_field, cfg.updated_field)
        }
        if cfg.default_status is not None and payload.get(FIELD_STATUS) is None:
            payload[FIELD_STATUS] = cfg.default_status
        payload[cfg.created_field] = SERVER_TIMESTAMP
        payload[cfg.updated_field] = SERVER_TIMESTAMP
        return payload

    def _update_payload(self, data: dict[str, Any]) -> dict[str, Any]:
        cfg = self._config
        skip = cfg.immutable_fields | {cfg.created_field, cfg.updated_field}
        payload = {k: v for k, v in data.items() if k not in skip}
        payload[cfg.updated_field] = SERVER_TIMESTAMP
        return payload

    @traced("repository.create")
    async def create(self, data: dict[str, Any]) -> T:
        """Store a new entity under a generated id and return it as stored."""
        try:
            ref = await self._coll.add(self._create_payload(data))
        except FirestoreError as e:
            logger.exception("Failed to add %s", self.kind)
            raise StoreFailureException("add", self.kind) from e
        logger.info("Created %s %s", self.kind, ref.id)
        await self.invalidate_and_refresh()
        return await self.require(ref.id)

    @traced("repository.update")
    async def update(self, entity_id: str, data: dict[str, Any]) -> T:
        """Merge fields into an existing entity; immutable fields are ignored."""
        await self._write_update(entity_id, self._update_payload(data))
        return await self.require(entity_id)

    async def _write_update(self, entity_id: str, payload: dict[str, Any]) -> None:
        await self._require_in_scope(entity_id)
        try:
            await self._coll.document(entity_id).update(payload)
        except DocumentNotFoundError:
            raise ResourceNotFoundException(self.kind, entity_id) from None
        except FirestoreError as e:
            logger.exception("Failed to update %s %s", self.kind, entity_id)
            raise StoreFailureException("update", self.kind) from e
        logger.info("Updated %s %s", self.kind, entity_id)
        await self.invalidate_and_refresh()

    @traced("repository.delete")
    async def delete(self, entity_id: str) -> None:
        """Delete an existing entity; ResourceNotFoundException if there is none."""
        await self._require_in_scope(entity_id)
        try:
            await self._coll.document(entity_id).delete(must_exist=True)
        except DocumentNotFoundError:
            raise ResourceNotFoundException(self.kind, entity_id) from None
        except FirestoreError as e:
            logger.exception("Failed to delete %s %s", self.kind, entity_id)
            raise StoreFailureException("delete", self.kind) from e
        logger.info("Deleted %s %s", self.kind, entity_id)
        await self.invalidate_and_refresh()


class ContentFirestoreRepository(CachedFirestoreRepository[T]):
    """Cached repository for site content, which also has an "active" view."""

    @traced("repository.get_active")
    async def get_active(self, force_refresh: bool = True) -> list[T]:
        """Return active entities in canonical order.

        Kept in its own view, so it never replaces the full list.
        """
        return await self._cached_view(
            VIEW_ACTIVE, ((FIELD_STATUS, "==", STATUS_ACTIVE),), force_refresh
        )


class OrderedFirestoreRepository(ContentFirestoreRepository[T]):
    """Cached repository for kinds with a user-assigned display order."""

    @traced("repository.update_order")
    async def update_order(self, entity_id: str, new_order: int) -> T:
        """Write only the order and update time of one entity."""
        if isinstance(new_order, bool) or not isinstance(new_order, int) or new_order < 0:
            raise ValidationException("Order must be a non-negative integer", field=FIELD_ORDER)
        await self._write_update(
            entity_id,
            {FIELD_ORDER: new_order, self._config.updated_field: SERVER_TIMESTAMP},
        )
        return await self.require(entity_id)
