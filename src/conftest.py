from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from src.guest_list.repository.store import GuestListStore, get_guest_list_store
from src.main import app


@pytest.fixture(scope="function")
def store() -> GuestListStore:
    """A fresh store seeded with the demonstration event and guest."""
    return GuestListStore(seed_fixture=True)


@pytest.fixture(scope="function")
def client_factory(store: GuestListStore):
    """Build a test client with the test store and any extra dependency overrides."""

    @asynccontextmanager
    async def _client_factory(overrides: dict | None = None):
        app.dependency_overrides[get_guest_list_store] = lambda: store
        app.dependency_overrides.update(overrides or {})

        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client_factory


@pytest.fixture(scope="function")
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac
