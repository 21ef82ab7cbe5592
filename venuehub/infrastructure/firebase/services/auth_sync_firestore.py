"""Firestore-backed auth record administration (implements IAuthSynchronizer).

An auth record points at its role profile through a ``<role>Id`` field
(``hotelId``, ``super-adminId``, ...). Status, name and email changes are
mirrored into the linked profile. All writes of one operation go into a single
batch, so the record and its profile are changed together or not at all.
"""

from __future__ import annotations

import logging
from typing import Any

from venuehub.application.dtos.auth import AuthRecordResult
from venuehub.core.constants import (
    FIELD_CREATED_ON,
    FIELD_STATUS,
    FIELD_UPDATED_AT,
    FIELD_UPDATED_ON,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from venuehub.domain.enums import UserRole
from venuehub.domain.exceptions import (
    ResourceNotFoundException,
    StoreFailureException,
    ValidationException,
)
from venuehub.infrastructure.firebase._rest_client import (
    DocumentNotFoundError,
    FirestoreError,
    FirestoreRESTClient,
    WriteBatch,
)
from venuehub.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from venuehub.infrastructure.firebase.collections import COLLECTION_AUTH
from venuehub.infrastructure.firebase.repositories._fields import timestamp
from venuehub.shared.telemetry import traced

logger = logging.getLogger(__name__)

AUTH_KIND = "auth entry"
PROFILE_KIND = "profile"

_LINK_FIELDS = frozenset(role.link_field for role in UserRole)


def _role_of(value: Any) -> UserRole | None:
    try:
        return UserRole(value)
    except ValueError:
        return None


def _to_result(doc_id: str, data: dict[str, Any]) -> AuthRecordResult:
    return AuthRecordResult(
        id=doc_id,
        name=data.get("name"),
        email=data.get("email"),
        role=data.get("role"),
        status=data.get(FIELD_STATUS),
        links={k: v for k, v in data.items() if k in _LINK_FIELDS and v},
        created_on=timestamp(data.get(FIELD_CREATED_ON)),
        updated_on=timestamp(data.get(FIELD_UPDATED_ON)),
    )


class FirestoreAuthSynchronizer:
    """Reads auth records and keeps their role profiles in step."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_AUTH)

    def _profile_ref(self, record: AuthRecordResult, role: UserRole):
        profile_id = record.profile_id(role)
        if not profile_id:
            return None
        return self._client.collection(role.collection).document(profile_id)

    @traced("auth_sync.list_auth")
    async def list_auth(self) -> list[AuthRecordResult]:
        """All auth records, newest first (records without createdOn last)."""
        try:
            records = [_to_result(s.id, s.to_dict()) async for s in self._coll.stream()]
        except FirestoreError as e:
            logger.exception("Failed to fetch auth entries")
            raise StoreFailureException("fetch", "auth entries") from e
        # Two stable sorts: newest first, then undated records last.
        records.sort(key=lambda r: r.created_on.timestamp() if r.created_on else 0, reverse=True)
        records.sort(key=lambda r: r.created_on is None)
        return records

    async def get_auth(self, auth_id: str) -> AuthRecordResult:
        """Return the auth record; ResourceNotFoundException if missing."""
        try:
            snapshot = await self._coll.document(auth_id).get()
        except FirestoreError as e:
            logger.exception("Failed to fetch auth entry %s", auth_id)
            raise StoreFailureException("fetch", AUTH_KIND) from e
        if snapshot is None:
            raise ResourceNotFoundException(AUTH_KIND, auth_id)
        return _to_result(snapshot.id, snapshot.to_dict())

    async def _commit(self, batch: WriteBatch, action: str, record: AuthRecordResult) -> None:
        try:
            await batch.commit()
        except DocumentNotFoundError:
            # The record was read a moment ago, so a missing document is a
            # dangling profile link or a concurrent delete.
            logger.warning("Commit for auth entry %s hit a missing document", record.id)
            raise ResourceNotFoundException(PROFILE_KIND, record.profile_id() or record.id) from None
        except FirestoreError as e:
            logger.exception("Failed to %s auth entry %s", action, record.id)
            raise StoreFailureException(action, AUTH_KIND) from e

    @traced("auth_sync.update_auth_status")
    async def update_auth_status(self, auth_id: str, status: str) -> AuthRecordResult:
        """Set the record's status and, unless the role is user, its profile's."""
        if status not in (STATUS_ACTIVE, STATUS_INACTIVE):
            raise ValidationException("Status must be 'active' or 'inactive'", field="status")
        record = await self.get_auth(auth_id)
        batch = self._client.batch()
        batch.update(
            self._coll.document(auth_id),
            {FIELD_STATUS: status, FIELD_UPDATED_ON: SERVER_TIMESTAMP},
        )
        role = _role_of(record.role)
        # User profiles stay active regardless of the record's status.
        if role is not None and role is not UserRole.USER:
            profile = self._profile_ref(record, role)
            if profile is not None:
                batch.update(profile, {FIELD_STATUS: status, FIELD_UPDATED_AT: SERVER_TIMESTAMP})
        await self._commit(batch, "update", record)
        logger.info("Auth entry %s status set to %s", auth_id, status)
        return await self.get_auth(auth_id)

    @traced("auth_sync.update_auth")
    async def update_auth(
        self, auth_id: str, name: str, email: str, role: str
    ) -> AuthRecordResult:
        """Change name, email and role; mirror name/email into linked profiles.

        On a role change both the old and the new role's linked profiles (each
        only if linked) receive the new name and email.
        """
        new_role = _role_of(role)
        if new_role is None:
            raise ValidationException(f"Invalid role: {role}", field="role")
        record = await self.get_auth(auth_id)
        old_role = _role_of(record.role)

        batch = self._client.batch()
        batch.update(
            self._coll.document(auth_id),
            {"name": name, "email": email, "role": new_role.value, FIELD_UPDATED_ON: SERVER_TIMESTAMP},
        )
        roles = [new_role] if old_role in (None, new_role) else [old_role, new_role]
        mirrored = {"name": name, "email": email, FIELD_UPDATED_AT: SERVER_TIMESTAMP}
        seen: set[str] = set()
        for r in roles:
            profile = self._profile_ref(record, r)
            # admin and super-admin share a collection; never write one profile twice.
            if profile is not None and profile.name not in seen:
                seen.add(profile.name)
                batch.update(profile, mirrored)
        await self._commit(batch, "update", record)
        logger.info("Auth entry %s updated (role %s -> %s)", auth_id, record.role, new_role.value)
        return await self.get_auth(auth_id)

    @traced("auth_sync.delete_auth")
    async def delete_auth(self, auth_id: str) -> None:
        """Delete the linked profile (if any) and the auth record in one batch."""
        record = await self.get_auth(auth_id)
        batch = self._client.batch()
        role = _role_of(record.role)
        if role is not None:
            profile = self._profile_ref(record, role)
            if profile is not None:
                batch.delete(profile)
        batch.delete(self._coll.document(auth_id), must_exist=True)
        try:
            await batch.commit()
        except DocumentNotFoundError:
            raise ResourceNotFoundException(AUTH_KIND, auth_id) from None
        except FirestoreError as e:
            logger.exception("Failed to delete auth entry %s", auth_id)
            raise StoreFailureException("delete", AUTH_KIND) from e
        logger.info("Deleted auth entry %s", auth_id)
