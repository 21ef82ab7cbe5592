"""Tests for the Firestore REST client (commit bodies, runQuery, value codec)."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from venuehub.infrastructure.firebase import SERVER_TIMESTAMP
from venuehub.infrastructure.firebase._rest_client import (
    DESCENDING,
    DocumentExistsError,
    DocumentNotFoundError,
    FirestoreError,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
    quote_field_path,
)

PREFIX = "projects/demo/databases/(default)/documents"


class _Credentials:
    valid = True
    token = "test-token"


class _Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0) if self._responses else httpx.Response(200, json={})

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def _client(recorder: _Recorder) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return FirestoreRESTClient("demo", _Credentials(), http_client=http)


async def test_update_sends_mask_transforms_and_exists_precondition() -> None:
    recorder = _Recorder()
    db = _client(recorder)

    await db.collection("heroSlides").document("s1").update(
        {"heading": "Hello", "updatedOn": SERVER_TIMESTAMP}
    )

    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path.endswith(f"{PREFIX}:commit")
    assert request.headers["Authorization"] == "Bearer test-token"
    (write,) = recorder.body()["writes"]
    assert write["update"] == {
        "name": f"{PREFIX}/heroSlides/s1",
        "fields": {"heading": {"stringValue": "Hello"}},
    }
    assert write["updateMask"] == {"fieldPaths": ["heading"]}
    assert write["updateTransforms"] == [
        {"fieldPath": "updatedOn", "setToServerValue": "REQUEST_TIME"}
    ]
    assert write["currentDocument"] == {"exists": True}


async def test_create_requires_absent_document_and_has_no_mask() -> None:
    recorder = _Recorder()
    db = _client(recorder)

    ref = await db.collection("weddings").add({"coupleNames": "A & B"})

    (write,) = recorder.body()["writes"]
    assert write["currentDocument"] == {"exists": False}
    assert "updateMask" not in write
    assert write["update"]["name"] == f"{PREFIX}/weddings/{ref.id}"
    assert ref.id


async def test_batch_commits_all_writes_in_one_request() -> None:
    recorder = _Recorder()
    db = _client(recorder)
    batch = db.batch()
    batch.update(db.collection("auth").document("a1"), {"status": "inactive"})
    batch.update(db.collection("admins").document("s1"), {"super-adminId": "x"})
    batch.delete(db.collection("hotels").document("h1"))

    await batch.commit()

    assert len(recorder.requests) == 1
    writes = recorder.body()["writes"]
    assert [list(w)[0] for w in writes] == ["update", "update", "delete"]
    assert writes[1]["updateMask"] == {"fieldPaths": ["`super-adminId`"]}
    assert "currentDocument" not in writes[2]
    assert len(batch) == 0


async def test_empty_batch_sends_nothing() -> None:
    recorder = _Recorder()
    assert await _client(recorder).batch().commit() == []
    assert recorder.requests == []


async def test_commit_404_raises_document_not_found() -> None:
    db = _client(_Recorder(httpx.Response(404, json={"error": {"status": "NOT_FOUND"}})))
    with pytest.raises(DocumentNotFoundError):
        await db.collection("heroSlides").document("ghost").delete(must_exist=True)


async def test_commit_409_raises_document_exists() -> None:
    db = _client(_Recorder(httpx.Response(409, json={})))
    with pytest.raises(DocumentExistsError):
        await db.collection("heroSlides").document("s1").create({"heading": "x"})


async def test_server_error_is_firestore_error_with_status() -> None:
    db = _client(_Recorder(httpx.Response(503, text="unavailable")))
    with pytest.raises(FirestoreError) as exc_info:
        await db.collection("heroSlides").document("s1").set({"heading": "x"})
    assert exc_info.value.status_code == 503


async def test_transport_error_is_firestore_error() -> None:
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(boom))
    db = FirestoreRESTClient("demo", _Credentials(), http_client=http)
    with pytest.raises(FirestoreError):
        await db.collection("heroSlides").document("s1").get()


async def test_get_missing_document_returns_none() -> None:
    db = _client(_Recorder(httpx.Response(404, json={})))
    assert await db.collection("heroSlides").document("ghost").get() is None


async def test_get_decodes_fields() -> None:
    document = {
        "name": f"{PREFIX}/hotels/h1",
        "fields": {"name": {"stringValue": "Palace"}, "isPremium": {"booleanValue": True}},
    }
    db = _client(_Recorder(httpx.Response(200, json=document)))
    snapshot = await db.collection("hotels").document("h1").get()
    assert snapshot.id == "h1"
    assert snapshot.to_dict() == {"name": "Palace", "isPremium": True}


async def test_run_query_builds_composite_filter_and_orders() -> None:
    rows = [
        {"document": {"name": f"{PREFIX}/heroExtension/i1", "fields": {"order": {"integerValue": "1"}}}},
        {"readTime": "2024-01-01T00:00:00Z"},
    ]
    recorder = _Recorder(httpx.Response(200, json=rows))
    db = _client(recorder)

    query = (
        db.collection("heroExtension")
        .where("type", "==", "tall_left")
        .where("status", "==", "active")
        .order_by("order")
        .order_by("createdOn", DESCENDING)
    )
    snapshots = [s async for s in query.stream()]

    assert [s.id for s in snapshots] == ["i1"]
    assert snapshots[0].to_dict() == {"order": 1}
    assert recorder.requests[0].url.path.endswith(f"{PREFIX}:runQuery")
    structured = recorder.body()["structuredQuery"]
    assert structured["from"] == [{"collectionId": "heroExtension"}]
    assert structured["where"]["compositeFilter"]["op"] == "AND"
    assert [f["fieldFilter"]["field"]["fieldPath"] for f in structured["where"]["compositeFilter"]["filters"]] == [
        "type",
        "status",
    ]
    assert structured["orderBy"] == [
        {"field": {"fieldPath": "order"}, "direction": "ASCENDING"},
        {"field": {"fieldPath": "createdOn"}, "direction": "DESCENDING"},
    ]
    assert "limit" not in structured
    assert "offset" not in structured


async def test_single_filter_is_not_wrapped() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))
    db = _client(recorder)
    [s async for s in db.collection("hotelEnquiries").where("authId", "==", "h1").stream()]
    where = recorder.body()["structuredQuery"]["where"]
    assert where["fieldFilter"]["op"] == "EQUAL"
    assert where["fieldFilter"]["value"] == {"stringValue": "h1"}


@pytest.mark.parametrize(
    ("name", "expected"),
    [("status", "status"), ("createdOn", "createdOn"), ("super-adminId", "`super-adminId`")],
)
def test_quote_field_path(name, expected) -> None:
    assert quote_field_path(name) == expected


def test_encode_datetime_as_utc() -> None:
    encoded = encode_document({"at": datetime(2024, 5, 1, 12, 30, tzinfo=UTC)})
    assert encoded == {"fields": {"at": {"timestampValue": "2024-05-01T12:30:00.000000Z"}}}


def test_decode_nanosecond_timestamp() -> None:
    decoded = decode_document({"fields": {"at": {"timestampValue": "2024-05-01T12:30:00.123456789Z"}}})
    assert decoded["at"] == datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=UTC)


def test_decode_nested_values() -> None:
    document = {
        "fields": {
            "images": {
                "mapValue": {
                    "fields": {
                        "main": {"stringValue": "m.jpg"},
                        "gallery": {"arrayValue": {"values": [{"stringValue": "g1.jpg"}]}},
                    }
                }
            },
            "photoCount": {"integerValue": "120"},
            "note": {"nullValue": None},
        }
    }
    assert decode_document(document) == {
        "images": {"main": "m.jpg", "gallery": ["g1.jpg"]},
        "photoCount": 120,
        "note": None,
    }
