"""Firestore-backed testimonials, shown by ascending order then newest first."""

from typing import Any

from venuehub.application.dtos.content import TestimonialResult
from venuehub.core.constants import FIELD_CREATED_ON, FIELD_ORDER, STATUS_ACTIVE
from venuehub.infrastructure.firebase._rest_client import (
    ASCENDING,
    DESCENDING,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase.collections import COLLECTION_TESTIMONIALS
from venuehub.infrastructure.firebase.repositories._fields import int_or, str_list, timestamp
from venuehub.infrastructure.firebase.repositories.cached_repository import (
    OrderedFirestoreRepository,
    RepositoryConfig,
)


def _to_result(doc_id: str, data: dict[str, Any]) -> TestimonialResult:
    return TestimonialResult(
        id=doc_id,
        name=data.get("name", ""),
        text=data.get("text", ""),
        images=str_list(data.get("images")),
        story_url=data.get("storyUrl"),
        status=data.get("status", STATUS_ACTIVE),
        order=int_or(data.get("order"), 0),
        created_on=timestamp(data.get("createdOn")),
        updated_on=timestamp(data.get("updatedOn")),
    )


TESTIMONIAL_CONFIG = RepositoryConfig(
    collection=COLLECTION_TESTIMONIALS,
    kind="testimonial",
    materialize=_to_result,
    order_by=((FIELD_ORDER, ASCENDING), (FIELD_CREATED_ON, DESCENDING)),
)


class FirestoreTestimonialRepository(OrderedFirestoreRepository[TestimonialResult]):
    def __init__(self, client: FirestoreRESTClient) -> None:
        super().__init__(client, TESTIMONIAL_CONFIG)

    async def create(self, data: dict[str, Any]) -> TestimonialResult:
        return await super().create({FIELD_ORDER: 0, **data})
