"""Tests for hotel, vendor and banquet enquiry endpoints (CRUD and premium-gated owner lists)."""

from datetime import UTC, datetime

from httpx import AsyncClient

from tests.fakes import FakeFirestoreClient
from venuehub.infrastructure.firebase.collections import (
    COLLECTION_BANQUET_ENQUIRIES,
    COLLECTION_BANQUETS,
    COLLECTION_HOTEL_ENQUIRIES,
    COLLECTION_HOTELS,
    COLLECTION_VENDOR_ENQUIRIES,
    COLLECTION_VENDORS,
)


def _seed_hotel_enquiries(fake_db: FakeFirestoreClient) -> None:
    for doc_id, owner, day in (("e1", "h1", 1), ("e2", "h2", 2), ("e3", "h1", 3)):
        fake_db.seed(
            COLLECTION_HOTEL_ENQUIRIES,
            doc_id,
            {"authId": owner, "hotelName": "Palace", "city": "Jaipur", "status": "Pending",
             "createdAt": datetime(2024, 2, day, tzinfo=UTC)},
        )


async def test_create_hotel_enquiry_defaults_to_pending(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/hotel-enquiries", json={"authId": "h1", "hotelName": "Palace", "city": "Jaipur"}
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "Pending"
    assert data["authId"] == "h1"
    assert data["createdAt"] is not None


async def test_hotel_enquiry_rejects_unknown_status(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/hotel-enquiries",
        json={"authId": "h1", "hotelName": "Palace", "city": "Jaipur", "status": "Approved"},
    )
    assert response.status_code == 400


async def test_update_hotel_enquiry_keeps_owner(client: AsyncClient) -> None:
    created = (
        await client.post(
            "/api/v1/hotel-enquiries",
            json={"authId": "h1", "hotelName": "Palace", "city": "Jaipur"},
        )
    ).json()["data"]
    response = await client.put(
        f"/api/v1/hotel-enquiries/{created['id']}",
        json={"authId": "intruder", "status": "Contacted"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["authId"] == "h1"
    assert response.json()["data"]["status"] == "Contacted"


async def test_enquiries_have_no_active_route(client: AsyncClient) -> None:
    """/active is treated as an enquiry id."""
    response = await client.get("/api/v1/hotel-enquiries/active")
    assert response.status_code == 404
    assert response.json()["message"] == "Hotel enquiry not found"


async def test_premium_hotel_lists_own_enquiries(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    _seed_hotel_enquiries(fake_db)
    fake_db.seed(COLLECTION_HOTELS, "h1", {"name": "Palace", "isPremium": True})

    response = await client.get("/api/v1/hotel-enquiries/hotel/h1")

    assert response.status_code == 200
    assert [e["id"] for e in response.json()["data"]] == ["e3", "e1"]


async def test_non_premium_hotel_is_403(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    _seed_hotel_enquiries(fake_db)
    fake_db.seed(COLLECTION_HOTELS, "h1", {"name": "Palace", "isPremium": False})

    response = await client.get("/api/v1/hotel-enquiries/hotel/h1")

    assert response.status_code == 403
    body = response.json()
    assert body["error_code"] == "ACCESS_DENIED"
    assert body["message"] == "Access denied: Hotel is not premium"


async def test_unknown_hotel_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hotel-enquiries/hotel/ghost")
    assert response.status_code == 404
    assert response.json()["message"] == "Hotel not found"


async def test_vendor_enquiry_flow(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    created = await client.post(
        "/api/v1/vendor-enquiries",
        json={"authId": "v1", "email": "dj@example.com", "phoneNumber": "555-0100"},
    )
    assert created.status_code == 201
    assert created.json()["data"]["phoneNumber"] == "555-0100"

    fake_db.seed(COLLECTION_VENDORS, "v1", {"name": "DJ", "isPremium": True})
    listed = await client.get("/api/v1/vendor-enquiries/vendor/v1")
    assert listed.status_code == 200
    assert len(listed.json()["data"]) == 1
    assert len(fake_db.docs(COLLECTION_VENDOR_ENQUIRIES)) == 1


async def test_vendor_enquiry_rejects_bad_email(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/vendor-enquiries",
        json={"authId": "v1", "email": "not-an-email", "phoneNumber": "555-0100"},
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("email:")


async def test_create_banquet_enquiry_defaults_to_new(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/banquet-enquiries",
        json={"authId": "b1", "name": "Asha", "phoneNumber": "555-0101", "message": "June 12"},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "New"
    assert data["email"] == ""
    assert data["message"] == "June 12"


async def test_banquet_enquiry_requires_name_and_phone(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/banquet-enquiries", json={"authId": "b1", "phoneNumber": "555-0101"}
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("name:")


async def test_banquet_enquiry_update_keeps_owner_and_message(client: AsyncClient) -> None:
    created = (
        await client.post(
            "/api/v1/banquet-enquiries",
            json={"authId": "b1", "name": "Asha", "phoneNumber": "555-0101", "message": "June 12"},
        )
    ).json()["data"]
    response = await client.put(
        f"/api/v1/banquet-enquiries/{created['id']}",
        json={"authId": "intruder", "message": "changed", "status": "In Progress"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["authId"], data["message"], data["status"]) == ("b1", "June 12", "In Progress")


async def test_premium_banquet_lists_own_enquiries(
    client: AsyncClient, fake_db: FakeFirestoreClient
) -> None:
    for doc_id, owner, day in (("q1", "b1", 1), ("q2", "b2", 2), ("q3", "b1", 3)):
        fake_db.seed(
            COLLECTION_BANQUET_ENQUIRIES,
            doc_id,
            {"authId": owner, "name": "Asha", "phoneNumber": "555", "status": "New",
             "createdAt": datetime(2024, 3, day, tzinfo=UTC)},
        )
    fake_db.seed(COLLECTION_BANQUETS, "b1", {"name": "Grand Hall", "isPremium": True})

    response = await client.get("/api/v1/banquet-enquiries/banquet/b1")

    assert response.status_code == 200
    assert [e["id"] for e in response.json()["data"]] == ["q3", "q1"]


async def test_non_premium_banquet_is_403(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    fake_db.seed(COLLECTION_BANQUETS, "b1", {"name": "Grand Hall", "isPremium": False})

    response = await client.get("/api/v1/banquet-enquiries/banquet/b1")

    assert response.status_code == 403
    assert response.json()["message"] == "Access denied: Banquet is not premium"


async def test_unknown_banquet_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/banquet-enquiries/banquet/ghost")
    assert response.status_code == 404
    assert response.json()["message"] == "Banquet not found"
