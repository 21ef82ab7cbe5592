"""Tests for the site content endpoints (hero, testimonials, about, weddings, hero extension)."""

from datetime import UTC, datetime

from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient

from tests.fakes import FakeFirestoreClient
from venuehub.api.v1.dependencies import get_testimonial_repo
from venuehub.main import create_app
from venuehub.infrastructure.firebase.collections import (
    COLLECTION_HERO_EXTENSION,
    COLLECTION_TESTIMONIALS,
)

STAMP = datetime(2023, 6, 1, tzinfo=UTC)


async def test_create_hero_slide_returns_201_envelope(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/hero", json={"heading": "Welcome", "image": "https://img/w.jpg", "cta": "Book"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Hero slide created successfully"
    slide = body["data"]
    assert slide["heading"] == "Welcome"
    assert slide["status"] == "active"
    assert slide["createdOn"] == slide["updatedOn"]


async def test_missing_required_field_is_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/hero", json={"image": "https://img/w.jpg"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["message"].startswith("heading:")


async def test_blank_required_field_is_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/hero", json={"heading": "   ", "image": "x"})
    assert response.status_code == 400


async def test_hero_slide_update_then_list(client: AsyncClient) -> None:
    created = (
        await client.post("/api/v1/hero", json={"heading": "Welcome", "image": "https://img/w.jpg"})
    ).json()["data"]

    response = await client.put(f"/api/v1/hero/{created['id']}", json={"heading": "Hello"})
    assert response.status_code == 200

    listed = (await client.get("/api/v1/hero")).json()["data"]
    assert [s["heading"] for s in listed] == ["Hello"]
    assert listed[0]["updatedOn"] > listed[0]["createdOn"]


async def test_get_missing_hero_slide_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hero/ghost")
    assert response.status_code == 404
    assert response.json()["message"] == "Hero slide not found"


async def test_delete_hero_slide(client: AsyncClient) -> None:
    created = (
        await client.post("/api/v1/hero", json={"heading": "Welcome", "image": "https://img/w.jpg"})
    ).json()["data"]
    response = await client.delete(f"/api/v1/hero/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"] == {"id": created["id"]}
    assert (await client.get("/api/v1/hero")).json()["data"] == []
    assert (await client.delete(f"/api/v1/hero/{created['id']}")).status_code == 404


async def test_active_list_filters_inactive(client: AsyncClient) -> None:
    await client.post("/api/v1/hero", json={"heading": "On", "image": "x"})
    await client.post("/api/v1/hero", json={"heading": "Off", "image": "x", "status": "inactive"})
    active = (await client.get("/api/v1/hero/active")).json()["data"]
    assert [s["heading"] for s in active] == ["On"]
    assert len((await client.get("/api/v1/hero")).json()["data"]) == 2


async def test_testimonial_order_endpoint(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    for doc_id, order in (("t3", 3), ("t1", 1), ("t2", 2)):
        fake_db.seed(
            COLLECTION_TESTIMONIALS,
            doc_id,
            {"name": doc_id, "text": "Lovely", "images": ["x"], "status": "active",
             "order": order, "createdOn": STAMP, "updatedOn": STAMP},
        )
    listed = (await client.get("/api/v1/testimonials")).json()["data"]
    assert [t["id"] for t in listed] == ["t1", "t2", "t3"]

    response = await client.put(
        "/api/v1/testimonials/order", json={"testimonialId": "t3", "newOrder": 0}
    )
    assert response.status_code == 200
    assert response.json()["data"]["order"] == 0

    listed = (await client.get("/api/v1/testimonials")).json()["data"]
    assert [t["id"] for t in listed] == ["t3", "t1", "t2"]


async def test_order_must_be_non_negative_integer(client: AsyncClient) -> None:
    for bad in (-1, 1.5, "2"):
        response = await client.put("/api/v1/testimonials/order", json={"id": "t1", "newOrder": bad})
        assert response.status_code == 400


async def test_testimonial_story_url_is_camel_case(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/testimonials",
        json={"name": "Ana", "text": "Great day", "images": ["a.jpg"], "storyUrl": "https://s"},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["storyUrl"] == "https://s"
    assert data["order"] == 0


async def test_process_steps_are_not_captured_by_about(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/about/process-steps", json={"title": "Pick a venue", "description": "Browse"}
    )
    assert created.status_code == 201
    assert created.json()["data"]["order"] == 1

    steps = await client.get("/api/v1/about/process-steps")
    assert steps.status_code == 200
    assert [s["title"] for s in steps.json()["data"]] == ["Pick a venue"]
    assert (await client.get("/api/v1/about")).json()["data"] == []


async def test_wedding_images_round_trip(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/weddings",
        json={
            "coupleNames": "Asha & Ravi",
            "photoCount": 120,
            "images": {"main": "m.jpg", "gallery": ["g1.jpg", "g2.jpg"]},
        },
    )
    assert response.status_code == 201
    wedding = response.json()["data"]
    assert wedding["coupleNames"] == "Asha & Ravi"
    assert wedding["images"]["main"] == "m.jpg"
    assert wedding["images"]["gallery"] == ["g1.jpg", "g2.jpg"]


async def test_wedding_requires_main_image(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/weddings", json={"coupleNames": "Asha & Ravi", "images": {"gallery": []}}
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("images.main:")


async def test_hero_extension_content_upsert(client: AsyncClient, fake_db: FakeFirestoreClient) -> None:
    empty = await client.get("/api/v1/hero-extension/content")
    assert empty.status_code == 200
    assert empty.json()["data"] is None

    await client.post("/api/v1/hero-extension/content", json={"title": "One", "subtitle": "Sub"})
    saved = await client.post(
        "/api/v1/hero-extension/content",
        json={"title": "Two", "subtitle": "Sub", "buttonText": "Plan"},
    )
    assert saved.status_code == 200
    assert saved.json()["data"]["buttonText"] == "Plan"
    assert len(fake_db.docs(COLLECTION_HERO_EXTENSION)) == 1

    images = (await client.get("/api/v1/hero-extension")).json()["data"]
    assert images == []


async def test_hero_extension_slots(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/hero-extension",
        json={"type": "tall_left", "imageUrl": "https://img/t.jpg", "altText": "Hall"},
    )
    assert created.status_code == 201

    by_type = (await client.get("/api/v1/hero-extension/type/tall_left")).json()["data"]
    assert [i["imageUrl"] for i in by_type] == ["https://img/t.jpg"]

    counts = (await client.get("/api/v1/hero-extension/counts")).json()["data"]
    assert counts["tall_left"] == 1
    assert counts["far_right"] == 0

    random = await client.get("/api/v1/hero-extension/type/far_right/random")
    assert random.status_code == 200
    assert random.json()["data"] is None


async def test_hero_extension_unknown_slot_is_400(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hero-extension/type/sideways")
    assert response.status_code == 400
    response = await client.post(
        "/api/v1/hero-extension",
        json={"type": "content", "imageUrl": "https://img/t.jpg", "altText": "Hall"},
    )
    assert response.status_code == 400


async def test_image_routes_cannot_modify_hero_extension_content(
    client: AsyncClient, fake_db: FakeFirestoreClient
) -> None:
    await client.post("/api/v1/hero-extension/content", json={"title": "T", "subtitle": "S"})
    stored = dict(fake_db.docs(COLLECTION_HERO_EXTENSION)["content"])

    updated = await client.put("/api/v1/hero-extension/content", json={"altText": "x", "order": 5})
    reordered = await client.put(
        "/api/v1/hero-extension/order", json={"imageId": "content", "newOrder": 5}
    )
    deleted = await client.delete("/api/v1/hero-extension/content")

    for response in (updated, reordered, deleted):
        assert response.status_code == 404
        assert response.json()["message"] == "Hero extension image not found"
    assert fake_db.docs(COLLECTION_HERO_EXTENSION)["content"] == stored
    content = (await client.get("/api/v1/hero-extension/content")).json()["data"]
    assert content["title"] == "T"


async def test_write_routes_pass_ids_by_name(repositories) -> None:
    """Repository calls carry entity_id/new_order as keywords, so spans can record them."""
    stored = await repositories.testimonials.create(
        {"name": "Ana", "text": "Great day", "images": ["a.jpg"]}
    )
    repo = AsyncMock()
    repo.kind = "testimonial"
    repo.update_order.return_value = stored
    repo.update.return_value = stored
    app = create_app()
    app.state.repositories = repositories
    app.dependency_overrides[get_testimonial_repo] = lambda: repo

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        await ac.put("/api/v1/testimonials/order", json={"testimonialId": stored.id, "newOrder": 2})
        await ac.put(f"/api/v1/testimonials/{stored.id}", json={"text": "Still great"})
        await ac.delete(f"/api/v1/testimonials/{stored.id}")

    repo.update_order.assert_awaited_once_with(entity_id=stored.id, new_order=2)
    repo.update.assert_awaited_once_with(entity_id=stored.id, data={"text": "Still great"})
    repo.delete.assert_awaited_once_with(entity_id=stored.id)
