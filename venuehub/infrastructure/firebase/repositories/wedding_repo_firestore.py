"""Firestore-backed showcase weddings (newest first)."""

from datetime import datetime
from typing import Any

from venuehub.application.dtos.content import WeddingImages, WeddingResult
from venuehub.core.constants import STATUS_ACTIVE
from venuehub.infrastructure.firebase._rest_client import FirestoreRESTClient
from venuehub.infrastructure.firebase.collections import COLLECTION_WEDDINGS
from venuehub.infrastructure.firebase.repositories._fields import str_list, timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    ContentFirestoreRepository,
    RepositoryConfig,
)


def _date_text(value: Any) -> str | None:
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value


def _images(raw: Any) -> WeddingImages:
    raw = raw or {}
    return WeddingImages(
        main=raw.get("main", ""),
        thumbnail1=raw.get("thumbnail1"),
        thumbnail2=raw.get("thumbnail2"),
        gallery=str_list(raw.get("gallery")),
    )


def _to_result(doc_id: str, data: dict[str, Any]) -> WeddingResult:
    photo_count = data.get("photoCount")
    return WeddingResult(
        id=doc_id,
        couple_names=data.get("coupleNames", ""),
        location=data.get("location"),
        photo_count=int(photo_count) if photo_count is not None else None,
        wedding_date=_date_text(data.get("weddingDate")),
        theme=data.get("theme"),
        description=data.get("description"),
        images=_images(data.get("images")),
        status=data.get("status", STATUS_ACTIVE),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


WEDDING_CONFIG = RepositoryConfig(
    collection=COLLECTION_WEDDINGS,
    kind="wedding",
    materialize=_to_result,
)


class FirestoreWeddingRepository(ContentFirestoreRepository[WeddingResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, WEDDING_CONFIG)
