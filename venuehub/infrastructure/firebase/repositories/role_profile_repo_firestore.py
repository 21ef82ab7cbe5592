"""Read access to role profile documents (hotels/{id}, vendors/{id}, ...)."""

from __future__ import annotations

import logging

from venuehub.application.dtos.auth import RoleProfileResult
from venuehub.domain.exceptions import StoreFailureException
from venuehub.infrastructure.firebase._rest_client import FirestoreError, FirestoreRESTClient

logger = logging.getLogger(__name__)


class FirestoreRoleProfileRepository:
    """Point reads of role profiles; not cached."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    async def get_profile(self, collection: str, profile_id: str) -> RoleProfileResult | None:
        """Return the profile document, or None when it does not exist."""
        try:
            doc = await self._client.collection(collection).document(profile_id).get()
        except FirestoreError as e:
            logger.exception("Failed to fetch profile %s/%s", collection, profile_id)
            raise StoreFailureException("fetch", "profile") from e
        if not doc:
            return None
        data = doc.to_dict()
        return RoleProfileResult(
            id=doc.id,
            collection=collection,
            name=data.get("name"),
            email=data.get("email"),
            status=data.get("status"),
            is_premium=bool(data.get("isPremium", False)),
        )
