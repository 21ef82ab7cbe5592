"""Pytest configuration and fixtures for venuehub.

HTTP tests run the app in-process through httpx.ASGITransport with the
repositories wired to the in-memory Firestore double from tests/fakes.py.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep the write limiter out of the way of test traffic; must be set before
# settings are first read.
os.environ["WRITE_RATE_LIMIT"] = "10000/minute"
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_KEY", None)
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_PATH", None)

from venuehub.api.v1.composition import Repositories, build_repositories  # noqa: E402
from venuehub.core.config import get_settings  # noqa: E402
from venuehub.main import create_app  # noqa: E402

from tests.fakes import FakeFirestoreClient  # noqa: E402

get_settings.cache_clear()


@pytest.fixture
def fake_db() -> FakeFirestoreClient:
    """Fresh in-memory Firestore for one test."""
    return FakeFirestoreClient()


@pytest.fixture
def repositories(fake_db: FakeFirestoreClient) -> Repositories:
    return build_repositories(fake_db)


@pytest.fixture
async def client(repositories: Repositories) -> AsyncClient:
    """Async HTTP client against an app whose store is the in-memory double."""
    app = create_app()
    app.state.repositories = repositories
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def unconfigured_client() -> AsyncClient:
    """Async HTTP client against an app started without Firestore credentials."""
    app = create_app()
    app.state.repositories = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
