"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.

Writes that need preconditions or server timestamps (create, update,
delete-if-exists, batches) go through the ``:commit`` endpoint so that every
write of one call is applied atomically.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

import httpx

from venuehub.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    encode_document,
    quote_field_path,
    split_server_timestamps,
)
from venuehub.shared.utils import new_document_id

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


class FirestoreError(Exception):
    """Raised for any failed Firestore request (HTTP or transport level)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class DocumentExistsError(FirestoreError):
    """Raised when a create hits an existing document ID (409)."""


class DocumentNotFoundError(FirestoreError):
    """Raised when a write requires an existing document and there is none (404)."""


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    *,
    missing_ok: bool = True,
) -> Any:
    """Perform async HTTP request to Firestore REST API.

    404 returns None when ``missing_ok`` (plain reads); otherwise it raises
    DocumentNotFoundError (failed ``exists`` precondition on commit).
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    try:
        if method == "GET":
            resp = await client.get(url, headers=headers)
        elif method == "PATCH":
            resp = await client.patch(url, headers=headers, json=body)
        elif method == "POST":
            resp = await client.post(url, headers=headers, json=body)
        elif method == "DELETE":
            resp = await client.delete(url, headers=headers)
        else:
            raise ValueError(f"Unsupported method: {method!r}")
    except httpx.HTTPError as e:
        raise FirestoreError(f"Firestore {method} failed: {e}") from e
    if resp.status_code == 404:
        if missing_ok:
            return None
        raise DocumentNotFoundError("Document not found", status_code=404)
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists", status_code=409)
    if resp.status_code not in (200, 204):
        raise FirestoreError(
            f"Firestore {method} returned {resp.status_code}: {resp.text[:200]}",
            status_code=resp.status_code,
        )
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _write_for_update(
    name: str,
    data: dict[str, Any],
    *,
    merge: bool,
    exists: bool | None,
) -> dict:
    """Build a commit Write; SERVER_TIMESTAMP fields become REQUEST_TIME transforms."""
    plain, server_fields = split_server_timestamps(data)
    write: dict[str, Any] = {"update": {"name": name, **encode_document(plain)}}
    if merge:
        write["updateMask"] = {"fieldPaths": [quote_field_path(k) for k in plain]}
    if server_fields:
        write["updateTransforms"] = [
            {"fieldPath": quote_field_path(k), "setToServerValue": "REQUEST_TIME"}
            for k in server_fields
        ]
    if exists is not None:
        write["currentDocument"] = {"exists": exists}
    return write


def _write_for_delete(name: str, *, must_exist: bool) -> dict:
    write: dict[str, Any] = {"delete": name}
    if must_exist:
        write["currentDocument"] = {"exists": True}
    return write


class WriteBatch:
    """Collects writes and applies them in one atomic ``:commit`` call."""

    def __init__(self, client: "FirestoreRESTClient"):
        self._client = client
        self._writes: list[dict] = []

    def __len__(self) -> int:
        return len(self._writes)

    def create(self, ref: "DocumentReference", data: dict[str, Any]) -> "WriteBatch":
        self._writes.append(_write_for_update(ref.name, data, merge=False, exists=False))
        return self

    def set(self, ref: "DocumentReference", data: dict[str, Any]) -> "WriteBatch":
        self._writes.append(_write_for_update(ref.name, data, merge=False, exists=None))
        return self

    def update(self, ref: "DocumentReference", data: dict[str, Any]) -> "WriteBatch":
        """Merge ``data`` into an existing document; the commit fails if it is missing."""
        self._writes.append(_write_for_update(ref.name, data, merge=True, exists=True))
        return self

    def delete(self, ref: "DocumentReference", *, must_exist: bool = False) -> "WriteBatch":
        self._writes.append(_write_for_delete(ref.name, must_exist=must_exist))
        return self

    async def commit(self) -> list[dict]:
        """Apply all collected writes; nothing is applied if any precondition fails."""
        if not self._writes:
            return []
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._client._prefix}:commit",
            method="POST",
            body={"writes": self._writes},
            access_token=await self._client.get_token(),
            missing_ok=False,
        )
        self._writes = []
        return (out or {}).get("writeResults", [])


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    @property
    def name(self) -> str:
        """Full resource name used in commit writes."""
        return self._path

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http, url, access_token=await self._client.get_token()
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def create(self, data: dict[str, Any]) -> None:
        """Create the document; DocumentExistsError if the ID is taken."""
        await self._client.batch().create(self, data).commit()

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (full replace)."""
        await self._client.batch().set(self, data).commit()

    async def update(self, data: dict[str, Any]) -> None:
        """Merge fields into the document; DocumentNotFoundError if it does not exist."""
        await self._client.batch().update(self, data).commit()

    async def delete(self, *, must_exist: bool = False) -> None:
        """Delete the document.

        Idempotent by default; with ``must_exist`` a missing document raises
        DocumentNotFoundError.
        """
        await self._client.batch().delete(self, must_exist=must_exist).commit()


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
    "array_contains_any": "ARRAY_CONTAINS_ANY",
    "array-contains-any": "ARRAY_CONTAINS_ANY",
}


class _Query:
    """Fluent query builder for a collection; runs via runQuery.

    Several ``where`` calls are AND-ed; ``order_by`` calls apply in order.
    Results are never paged or limited.
    """

    def __init__(self, client: "FirestoreRESTClient", parent: str, collection_id: str):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, str]] = []

    def where(self, field: str, op: str, value: Any) -> "_Query":
        self._filters.append((field, _OP_MAP.get(op, op), value))
        return self

    def order_by(self, field: str, direction: str = ASCENDING) -> "_Query":
        self._orders.append((field, direction))
        return self

    def _structured_where(self) -> dict | None:
        filters = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": quote_field_path(field)},
                    "op": op,
                    "value": _encode_value(value),
                }
            }
            for field, op, value in self._filters
        ]
        if not filters:
            return None
        if len(filters) == 1:
            return filters[0]
        return {"compositeFilter": {"op": "AND", "filters": filters}}

    def to_structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {"from": [{"collectionId": self._collection_id}]}
        where = self._structured_where()
        if where is not None:
            structured["where"] = where
        if self._orders:
            structured["orderBy"] = [
                {"field": {"fieldPath": quote_field_path(f)}, "direction": d}
                for f, d in self._orders
            ]
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        url = f"{_BASE}/{self._parent}:runQuery"
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body={"structuredQuery": self.to_structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            doc = item["document"]
            name = doc.get("name", "")
            doc_id = name.split("/")[-1] if name else ""
            yield DocumentSnapshot(doc_id, decode_document(doc))


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    def document(self, document_id: str | None = None) -> DocumentReference:
        """Reference a document; a fresh cuid is used when no ID is given."""
        return DocumentReference(self._client, f"{self._path}/{document_id or new_document_id()}")

    async def add(self, data: dict[str, Any]) -> DocumentReference:
        """Create a document under a generated ID and return its reference."""
        ref = self.document()
        await ref.create(data)
        return ref

    def _query(self) -> _Query:
        parent = self._path.rsplit("/", 1)[0]
        return _Query(self._client, parent, self.id)

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with a filter. Chain .where(), .order_by(), then .stream()."""
        return self._query().where(field, op, value)

    def order_by(self, field: str, direction: str = ASCENDING) -> _Query:
        return self._query().order_by(field, direction)

    def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """All documents in the collection (unfiltered runQuery, no page limit)."""
        return self._query().stream()


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    def batch(self) -> WriteBatch:
        return WriteBatch(self)
