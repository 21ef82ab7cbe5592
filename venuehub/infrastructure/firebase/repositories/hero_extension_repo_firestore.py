"""Firestore-backed hero-extension images and the hero-extension content block.

Both live in the heroExtension collection. Images carry a layout slot in
``type``; the content block is the single document with id ``content`` and
``type == "content"``, so image queries filter on the six slot values.
"""

from __future__ import annotations

import logging
import random
from typing import Any

from venuehub.application.dtos.content import HeroContentResult, HeroImageResult
from venuehub.core.constants import (
    FIELD_CREATED_ON,
    FIELD_ORDER,
    FIELD_STATUS,
    FIELD_UPDATED_ON,
    HERO_EXTENSION_CONTENT_ID,
    HERO_EXTENSION_CONTENT_TYPE,
    STATUS_ACTIVE,
)
from venuehub.domain.enums import HeroImageType
from venuehub.domain.exceptions import StoreFailureException, ValidationException
from venuehub.infrastructure.firebase._rest_client import (
    ASCENDING,
    DESCENDING,
    FirestoreError,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from venuehub.infrastructure.firebase.collections import COLLECTION_HERO_EXTENSION
from venuehub.infrastructure.firebase.repositories._fields import int_or, timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    OrderedFirestoreRepository,
    RepositoryConfig,
)
from venuehub.shared.telemetry import traced

logger = logging.getLogger(__name__)

IMAGE_TYPES: list[str] = [t.value for t in HeroImageType]
CONTENT_KIND = "hero extension content"


def _image_to_result(doc_id: str, data: dict[str, Any]) -> HeroImageResult:
    return HeroImageResult(
        id=doc_id,
        type=data["type"],
        image_url=data.get("imageUrl", ""),
        alt_text=data.get("altText", ""),
        order=int_or(data.get("order"), 0),
        status=data.get("status", STATUS_ACTIVE),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


def _content_to_result(doc_id: str, data: dict[str, Any]) -> HeroContentResult:
    return HeroContentResult(
        id=doc_id,
        title=data.get("title", ""),
        subtitle=data.get("subtitle", ""),
        button_text=data.get("buttonText"),
        button_link=data.get("buttonLink"),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


HERO_IMAGE_CONFIG = RepositoryConfig(
    collection=COLLECTION_HERO_EXTENSION,
    kind="hero extension image",
    materialize=_image_to_result,
    order_by=((FIELD_ORDER, ASCENDING), (FIELD_CREATED_ON, DESCENDING)),
    base_filters=(("type", "in", IMAGE_TYPES),),
)


def _check_type(image_type: str) -> str:
    if image_type not in IMAGE_TYPES:
        raise ValidationException(
            f"Invalid image type; expected one of {', '.join(IMAGE_TYPES)}", field="type"
        )
    return image_type


class FirestoreHeroExtensionRepository(OrderedFirestoreRepository[HeroImageResult]):
    """Slot images (cached, with one view per slot) plus the content singleton."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, HERO_IMAGE_CONFIG)
        self._content_ref = self._coll.document(HERO_EXTENSION_CONTENT_ID)

    async def create(self, data: dict[str, Any]) -> HeroImageResult:
        _check_type(data.get("type"))
        return await super().create({FIELD_ORDER: 0, **data})

    async def update(self, entity_id: str, data: dict[str, Any]) -> HeroImageResult:
        if "type" in data:
            _check_type(data["type"])
        return await super().update(entity_id=entity_id, data=data)

    @traced("repository.get_by_type")
    async def get_by_type(
        self, image_type: str, force_refresh: bool = False
    ) -> list[HeroImageResult]:
        """Images of one slot, in display order."""
        _check_type(image_type)
        return await self._cached_view(
            f"type:{image_type}", (("type", "==", image_type),), force_refresh
        )

    @traced("repository.get_active_by_type")
    async def get_active_by_type(
        self, image_type: str, force_refresh: bool = True
    ) -> list[HeroImageResult]:
        """Active images of one slot, in display order."""
        _check_type(image_type)
        return await self._cached_view(
            f"active:{image_type}",
            (("type", "==", image_type), (FIELD_STATUS, "==", STATUS_ACTIVE)),
            force_refresh,
        )

    async def get_random_active_by_type(self, image_type: str) -> HeroImageResult | None:
        """One active image of the slot picked at random; None when the slot is empty."""
        images = await self.get_active_by_type(image_type=image_type)
        return random.choice(images) if images else None

    @traced("repository.count_active_by_type")
    async def count_active_by_type(self) -> dict[str, int]:
        """Active image count for every slot (slots without images report 0)."""
        counts = dict.fromkeys(IMAGE_TYPES, 0)
        for image in await self.get_active():
            counts[image.type] = counts.get(image.type, 0) + 1
        return counts

    async def get_content(self) -> HeroContentResult | None:
        """The content singleton, or None if it was never saved."""
        try:
            snapshot = await self._content_ref.get()
        except FirestoreError as e:
            logger.exception("Failed to fetch %s", CONTENT_KIND)
            raise StoreFailureException("fetch", CONTENT_KIND) from e
        if snapshot is None:
            return None
        return _content_to_result(snapshot.id, snapshot.to_dict())

    @traced("repository.upsert_content")
    async def upsert_content(self, data: dict[str, Any]) -> HeroContentResult:
        """Create or overwrite the content singleton.

        Writes to a fixed document id, so repeated calls never produce a
        second content document. createdOn survives overwrites.
        """
        try:
            existing = await self._content_ref.get()
            stored = existing.to_dict() if existing is not None else {}
            payload = {
                **stored,
                **{k: v for k, v in data.items() if k not in ("id", FIELD_CREATED_ON)},
                "type": HERO_EXTENSION_CONTENT_TYPE,
                FIELD_CREATED_ON: stored.get(FIELD_CREATED_ON) or SERVER_TIMESTAMP,
                FIELD_UPDATED_ON: SERVER_TIMESTAMP,
            }
            await self._content_ref.set(payload)
        except FirestoreError as e:
            logger.exception("Failed to save %s", CONTENT_KIND)
            raise StoreFailureException("save", CONTENT_KIND) from e
        logger.info("Saved %s", CONTENT_KIND)
        content = await self.get_content()
        if content is None:
            raise StoreFailureException("save", CONTENT_KIND)
        return content
