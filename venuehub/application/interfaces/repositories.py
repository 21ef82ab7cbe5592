"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from venuehub.application.dtos.auth import AuthRecordResult, RoleProfileResult
    from venuehub.application.dtos.content import HeroContentResult, HeroImageResult

T = TypeVar("T")
E = TypeVar("E")


class ICachedRepository(Protocol[T]):
    """CRUD over one entity kind, backed by a per-process cache."""

    kind: str

    async def get_all(self, force_refresh: bool = False) -> list[T]:
        """Return every entity in canonical order (cached unless forced)."""

    async def get_by_id(self, entity_id: str) -> T | None:
        """Return entity from cache or a single point read; None if absent."""

    async def create(self, data: dict[str, Any]) -> T:
        """Persist a new entity and return it as stored."""

    async def update(self, entity_id: str, data: dict[str, Any]) -> T:
        """Merge fields into an existing entity and return it as stored."""

    async def delete(self, entity_id: str) -> None:
        """Remove an entity; not found if it does not exist."""

    async def invalidate_and_refresh(self) -> list[T]:
        """Drop all cached views and reload the full list."""


class IContentRepository(ICachedRepository[T], Protocol[T]):
    """Site content kinds, which also have an active view."""

    async def get_active(self, force_refresh: bool = True) -> list[T]:
        """Return entities whose status is active, in canonical order."""


class IOrderedRepository(IContentRepository[T], Protocol[T]):
    """Kinds with a user-controlled display order."""

    async def update_order(self, entity_id: str, new_order: int) -> T:
        """Write only the order (and update time)."""


class IHeroExtensionRepository(IOrderedRepository["HeroImageResult"], Protocol):
    """Hero-extension slot images plus the content singleton."""

    async def get_by_type(self, image_type: str, force_refresh: bool = False) -> list[HeroImageResult]:
        """Images of one slot."""

    async def get_active_by_type(self, image_type: str, force_refresh: bool = True) -> list[HeroImageResult]:
        """Active images of one slot."""

    async def get_random_active_by_type(self, image_type: str) -> HeroImageResult | None:
        """One active image of the slot chosen at random, or None."""

    async def count_active_by_type(self) -> dict[str, int]:
        """Number of active images per slot (every slot present)."""

    async def get_content(self) -> HeroContentResult | None:
        """The content singleton, or None before the first upsert."""

    async def upsert_content(self, data: dict[str, Any]) -> HeroContentResult:
        """Create or overwrite the content singleton."""


class IEnquiryRepository(ICachedRepository[E], Protocol[E]):
    async def list_by_owner(self, auth_id: str) -> list[E]:
        """Enquiries submitted by auth_id, newest first."""


class IRoleProfileRepository(Protocol):
    async def get_profile(self, collection: str, profile_id: str) -> RoleProfileResult | None:
        """Return role profile document or None."""


class IAuthSynchronizer(Protocol):
    """Keeps auth records and their linked role profiles consistent."""

    async def list_auth(self) -> list[AuthRecordResult]:
        """All auth records, newest first."""

    async def get_auth(self, auth_id: str) -> AuthRecordResult:
        """Auth record; not found if missing."""

    async def update_auth_status(self, auth_id: str, status: str) -> AuthRecordResult:
        """Set status on the record and (unless role is user) its profile."""

    async def update_auth(
        self, auth_id: str, name: str, email: str, role: str
    ) -> AuthRecordResult:
        """Change identity fields and mirror name/email into linked profiles."""

    async def delete_auth(self, auth_id: str) -> None:
        """Delete the linked profile and the record together."""
