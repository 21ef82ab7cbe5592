"""Firestore-backed hero slides (newest first)."""

from typing import Any

from venuehub.application.dtos.content import HeroSlideResult
from venuehub.core.constants import STATUS_ACTIVE
from venuehub.infrastructure.firebase._rest_client import FirestoreRESTClient
from venuehub.infrastructure.firebase.collections import COLLECTION_HERO_SLIDES
from venuehub.infrastructure.firebase.repositories._fields import timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    ContentFirestoreRepository,
    RepositoryConfig,
)


def _to_result(doc_id: str, data: dict[str, Any]) -> HeroSlideResult:
    return HeroSlideResult(
        id=doc_id,
        heading=data.get("heading", ""),
        image=data.get("image", ""),
        subtext=data.get("subtext"),
        cta=data.get("cta"),
        status=data.get("status", STATUS_ACTIVE),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


HERO_SLIDE_CONFIG = RepositoryConfig(
    collection=COLLECTION_HERO_SLIDES,
    kind="hero slide",
    materialize=_to_result,
)


class FirestoreHeroSlideRepository(ContentFirestoreRepository[HeroSlideResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, HERO_SLIDE_CONFIG)
