"""Tests for the cached Firestore repository (cache reuse, refresh, ordering, writes)."""

from datetime import UTC, datetime

import pytest

from tests.fakes import FakeFirestoreClient
from venuehub.domain.exceptions import (
    ResourceNotFoundException,
    StoreFailureException,
    ValidationException,
)
from venuehub.infrastructure.firebase.collections import (
    COLLECTION_HERO_SLIDES,
    COLLECTION_HOTEL_ENQUIRIES,
    COLLECTION_TESTIMONIALS,
)
from venuehub.infrastructure.firebase.repositories import (
    FirestoreHeroSlideRepository,
    FirestoreHotelEnquiryRepository,
    FirestoreTestimonialRepository,
)

CREATED = datetime(2023, 6, 1, tzinfo=UTC)


def _slide(heading: str, status: str = "active", day: int = 1) -> dict:
    stamp = datetime(2023, 6, day, tzinfo=UTC)
    return {
        "heading": heading,
        "image": f"https://img/{heading}.jpg",
        "status": status,
        "createdOn": stamp,
        "updatedOn": stamp,
    }


@pytest.fixture
def slides(fake_db: FakeFirestoreClient) -> FirestoreHeroSlideRepository:
    return FirestoreHeroSlideRepository(fake_db)


async def test_get_all_twice_reads_store_once(fake_db, slides) -> None:
    """A second get_all(False) is served from the cache."""
    fake_db.seed(COLLECTION_HERO_SLIDES, "a", _slide("A"))
    first = await slides.get_all()
    second = await slides.get_all(force_refresh=False)
    assert [s.id for s in first] == ["a"]
    assert first == second
    assert fake_db.queries == 1


async def test_force_refresh_rereads_store(fake_db, slides) -> None:
    await slides.get_all()
    fake_db.seed(COLLECTION_HERO_SLIDES, "b", _slide("B"))
    assert await slides.get_all() == []
    refreshed = await slides.get_all(force_refresh=True)
    assert [s.id for s in refreshed] == ["b"]
    assert fake_db.queries == 2


async def test_hero_slides_newest_first(fake_db, slides) -> None:
    fake_db.seed(COLLECTION_HERO_SLIDES, "old", _slide("Old", day=1))
    fake_db.seed(COLLECTION_HERO_SLIDES, "new", _slide("New", day=5))
    fake_db.seed(COLLECTION_HERO_SLIDES, "mid", _slide("Mid", day=3))
    assert [s.id for s in await slides.get_all()] == ["new", "mid", "old"]


async def test_create_returns_stored_entity_and_is_visible_without_refresh(fake_db, slides) -> None:
    """Read-your-write: the created slide is in the cached list the writer reads next."""
    created = await slides.create({"heading": "Welcome", "image": "https://img/w.jpg"})
    assert created.status == "active"
    assert created.created_on is not None
    assert created.created_on == created.updated_on
    queries_after_write = fake_db.queries

    cached = await slides.get_all(force_refresh=False)
    assert [s.id for s in cached] == [created.id]
    assert fake_db.queries == queries_after_write


async def test_hero_slide_update_scenario(fake_db, slides) -> None:
    """Create, list, update: the cached list shows the new heading with a later updatedOn."""
    created = await slides.create({"heading": "Welcome", "image": "https://img/w.jpg"})
    await slides.get_all()

    updated = await slides.update(created.id, {"heading": "Hello"})

    listed = await slides.get_all(force_refresh=False)
    assert len(listed) == 1
    assert listed[0].heading == "Hello"
    assert listed[0].updated_on > listed[0].created_on
    assert updated == listed[0]


async def test_update_ignores_id_and_created_on(fake_db, slides) -> None:
    created = await slides.create({"heading": "Welcome", "image": "https://img/w.jpg"})
    updated = await slides.update(
        created.id, {"id": "other", "createdOn": CREATED, "subtext": "Hi"}
    )
    assert updated.id == created.id
    assert updated.created_on == created.created_on
    assert updated.subtext == "Hi"
    assert "other" not in fake_db.docs(COLLECTION_HERO_SLIDES)


async def test_update_missing_raises_not_found(slides) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await slides.update("missing", {"heading": "x"})
    assert exc_info.value.message == "Hero slide not found"
    assert exc_info.value.details == {"kind": "hero slide", "resource_id": "missing"}


async def test_delete_removes_from_store_and_cache(fake_db, slides) -> None:
    fake_db.seed(COLLECTION_HERO_SLIDES, "a", _slide("A"))
    fake_db.seed(COLLECTION_HERO_SLIDES, "b", _slide("B", day=2))
    await slides.get_all()

    await slides.delete("a")

    assert "a" not in fake_db.docs(COLLECTION_HERO_SLIDES)
    assert [s.id for s in await slides.get_all(force_refresh=False)] == ["b"]


async def test_delete_missing_raises_not_found(slides) -> None:
    with pytest.raises(ResourceNotFoundException):
        await slides.delete("missing")


async def test_failed_refresh_keeps_previous_cache(fake_db, slides) -> None:
    """A refresh that fails raises a store failure and leaves the cached list intact."""
    fake_db.seed(COLLECTION_HERO_SLIDES, "a", _slide("A"))
    before = await slides.get_all()

    fake_db.failing.add("query")
    with pytest.raises(StoreFailureException) as exc_info:
        await slides.get_all(force_refresh=True)
    assert exc_info.value.message == "Failed to fetch hero slide"
    assert isinstance(exc_info.value.__cause__, Exception)

    fake_db.failing.clear()
    queries = fake_db.queries
    assert await slides.get_all(force_refresh=False) == before
    assert fake_db.queries == queries


async def test_failed_write_is_store_failure(fake_db, slides) -> None:
    fake_db.failing.add("commit")
    with pytest.raises(StoreFailureException) as exc_info:
        await slides.create({"heading": "Welcome", "image": "https://img/w.jpg"})
    assert exc_info.value.message == "Failed to add hero slide"


async def test_active_refresh_does_not_shrink_full_list(fake_db, slides) -> None:
    fake_db.seed(COLLECTION_HERO_SLIDES, "a", _slide("A"))
    fake_db.seed(COLLECTION_HERO_SLIDES, "b", _slide("B", status="inactive", day=2))
    fake_db.seed(COLLECTION_HERO_SLIDES, "c", _slide("C", day=3))

    assert len(await slides.get_all()) == 3
    active = await slides.get_active()
    assert [s.id for s in active] == ["c", "a"]
    assert len(await slides.get_all(force_refresh=False)) == 3


async def test_get_active_refreshes_by_default(fake_db, slides) -> None:
    await slides.get_active()
    await slides.get_active()
    assert fake_db.queries == 2
    await slides.get_active(force_refresh=False)
    assert fake_db.queries == 2


async def test_get_by_id_uses_cache_then_point_read(fake_db, slides) -> None:
    fake_db.seed(COLLECTION_HERO_SLIDES, "a", _slide("A"))
    await slides.get_all()
    reads = fake_db.reads

    assert (await slides.get_by_id("a")).heading == "A"
    assert fake_db.reads == reads

    fake_db.seed(COLLECTION_HERO_SLIDES, "late", _slide("Late"))
    found = await slides.get_by_id("late")
    assert found is not None and found.heading == "Late"
    assert fake_db.reads == reads + 1


async def test_get_by_id_miss_returns_none_without_list_refresh(fake_db, slides) -> None:
    queries = fake_db.queries
    assert await slides.get_by_id("nope") is None
    assert fake_db.queries == queries


async def test_testimonials_sorted_by_order_then_newest(fake_db) -> None:
    """Orders [3, 1, 2] with equal createdOn come back as [1, 2, 3]."""
    repo = FirestoreTestimonialRepository(fake_db)
    for doc_id, order in (("t3", 3), ("t1", 1), ("t2", 2)):
        fake_db.seed(
            COLLECTION_TESTIMONIALS,
            doc_id,
            {"name": doc_id, "text": "Lovely", "images": ["x"], "status": "active",
             "order": order, "createdOn": CREATED, "updatedOn": CREATED},
        )
    assert [t.order for t in await repo.get_all()] == [1, 2, 3]


async def test_testimonial_create_defaults_order_zero(fake_db) -> None:
    repo = FirestoreTestimonialRepository(fake_db)
    created = await repo.create({"name": "Ana", "text": "Great day", "images": ["a.jpg"]})
    assert created.order == 0
    assert created.images == ("a.jpg",)


async def test_update_order_writes_only_order_and_updated_on(fake_db) -> None:
    repo = FirestoreTestimonialRepository(fake_db)
    created = await repo.create({"name": "Ana", "text": "Great day", "images": ["a.jpg"]})
    before = fake_db.docs(COLLECTION_TESTIMONIALS)[created.id].copy()

    moved = await repo.update_order(created.id, 4)

    after = fake_db.docs(COLLECTION_TESTIMONIALS)[created.id]
    changed = {k for k in after if after[k] != before.get(k)}
    assert changed == {"order", "updatedOn"}
    assert moved.order == 4


@pytest.mark.parametrize("bad", [-1, 1.5, True, "2"])
async def test_update_order_rejects_non_natural_numbers(fake_db, bad) -> None:
    repo = FirestoreTestimonialRepository(fake_db)
    with pytest.raises(ValidationException):
        await repo.update_order("any", bad)
    assert fake_db.commits == []


async def test_enquiry_defaults_and_immutable_owner(fake_db) -> None:
    repo = FirestoreHotelEnquiryRepository(fake_db)
    created = await repo.create({"authId": "h1", "hotelName": "Palace", "city": "Jaipur"})
    assert created.status == "Pending"
    assert created.created_at is not None

    updated = await repo.update(created.id, {"authId": "someone-else", "status": "Contacted"})
    assert updated.auth_id == "h1"
    assert updated.status == "Contacted"
    assert fake_db.docs(COLLECTION_HOTEL_ENQUIRIES)[created.id]["authId"] == "h1"


async def test_enquiries_have_no_active_view(fake_db) -> None:
    repo = FirestoreHotelEnquiryRepository(fake_db)
    assert not hasattr(repo, "get_active")
    assert hasattr(FirestoreHeroSlideRepository(fake_db), "get_active")


async def test_list_by_owner_is_filtered_and_newest_first(fake_db) -> None:
    repo = FirestoreHotelEnquiryRepository(fake_db)
    for doc_id, owner, day in (("e1", "h1", 1), ("e2", "h2", 2), ("e3", "h1", 3)):
        fake_db.seed(
            COLLECTION_HOTEL_ENQUIRIES,
            doc_id,
            {"authId": owner, "hotelName": "H", "city": "C", "status": "Pending",
             "createdAt": datetime(2024, 2, day, tzinfo=UTC)},
        )
    assert [e.id for e in await repo.list_by_owner("h1")] == ["e3", "e1"]
