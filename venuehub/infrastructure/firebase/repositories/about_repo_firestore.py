"""Firestore-backed about-page content and the numbered process steps."""

from typing import Any

from venuehub.application.dtos.content import AboutContentResult, ProcessStepResult
from venuehub.core.constants import FIELD_CREATED_ON, FIELD_ORDER, STATUS_ACTIVE
from venuehub.infrastructure.firebase._rest_client import (
    ASCENDING,
    DESCENDING,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase.collections import (
    COLLECTION_ABOUT_CONTENT,
    COLLECTION_PROCESS_STEPS,
)
from venuehub.infrastructure.firebase.repositories._fields import int_or, timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    ContentFirestoreRepository,
    RepositoryConfig,
)


def _about_to_result(doc_id: str, data: dict[str, Any]) -> AboutContentResult:
    return AboutContentResult(
        id=doc_id,
        title=data.get("title", ""),
        subtitle=data.get("subtitle"),
        description=data.get("description", ""),
        image=data.get("image"),
        button_text=data.get("buttonText"),
        button_link=data.get("buttonLink"),
        status=data.get("status", STATUS_ACTIVE),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


def _step_to_result(doc_id: str, data: dict[str, Any]) -> ProcessStepResult:
    return ProcessStepResult(
        id=doc_id,
        icon=data.get("icon"),
        title=data.get("title", ""),
        description=data.get("description", ""),
        bg_color=data.get("bgColor"),
        title_color=data.get("titleColor"),
        order=int_or(data.get("order"), 1),
        status=data.get("status", STATUS_ACTIVE),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


ABOUT_CONTENT_CONFIG = RepositoryConfig(
    collection=COLLECTION_ABOUT_CONTENT,
    kind="about content",
    materialize=_about_to_result,
)

PROCESS_STEP_CONFIG = RepositoryConfig(
    collection=COLLECTION_PROCESS_STEPS,
    kind="process step",
    materialize=_step_to_result,
    order_by=((FIELD_ORDER, ASCENDING), (FIELD_CREATED_ON, DESCENDING)),
)


class FirestoreAboutContentRepository(ContentFirestoreRepository[AboutContentResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, ABOUT_CONTENT_CONFIG)


class FirestoreProcessStepRepository(ContentFirestoreRepository[ProcessStepResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, PROCESS_STEP_CONFIG)

    async def create(self, data: dict[str, Any]) -> ProcessStepResult:
        return await super().create({FIELD_ORDER: 1, **data})
