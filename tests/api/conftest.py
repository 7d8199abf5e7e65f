"""Route test fixtures - fake store + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeDocumentStore
    - get_store dependency overridden to return it
    - App exceptions are not re-raised by the transport, so catch-all 500s are observable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from docgate.infrastructure.database import get_store
from docgate.main import app
from tests.api.fake_store import FakeDocumentStore


@pytest.fixture
def fake_store():
    return FakeDocumentStore()


@pytest.fixture
async def client(fake_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: fake_store

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
