"""Pytest configuration and fixtures for the storefront."""

import pytest
import pytest_asyncio
from fakeredis import aioredis as fakeredis
from httpx import ASGITransport, AsyncClient

from cocoacrest.config import settings
from cocoacrest.models.effects import BrowserEffects
from cocoacrest.services.browser.recorded import RecordingDialogs
from cocoacrest.services.catalog.store import CatalogStore, get_catalog_store
from cocoacrest.services.storage.key_value import RedisKeyValueStorage, get_redis_client
from cocoacrest.services.view.session_registry import get_session_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest_asyncio.fixture()
async def redis_client():
    """Provide a fake Redis client for each test."""
    client = fakeredis.FakeRedis(decode_responses=True)
    try:
        yield client
    finally:
        await client.flushdb()
        await client.aclose()


@pytest.fixture()
def storage(redis_client):
    return RedisKeyValueStorage(redis_client)


@pytest.fixture()
def store(storage):
    """A catalog store that has not been loaded yet."""
    counter = iter(range(1, 1000))
    return CatalogStore(
        storage,
        settings.CATALOG_STORAGE_KEY,
        id_factory=lambda: f"choc-test-{next(counter)}",
    )


@pytest.fixture()
def effects():
    return BrowserEffects()


@pytest.fixture()
def dialogs(effects):
    """Dialogs that decline confirmations."""
    return RecordingDialogs(effects)


@pytest.fixture()
def confirming_dialogs(effects):
    return RecordingDialogs(effects, confirmed=True)


@pytest.fixture(autouse=True)
def fresh_sessions():
    """Page sessions never leak between tests."""
    registry = get_session_registry()
    registry.clear()
    yield registry
    registry.clear()


@pytest_asyncio.fixture()
async def client(redis_client, store):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from cocoacrest.main import app

    async def _loaded_store():
        await store.ensure_loaded()
        return store

    app.dependency_overrides[get_redis_client] = lambda: redis_client
    app.dependency_overrides[get_catalog_store] = _loaded_store
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://testserver",
        ) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_redis_client, None)
        app.dependency_overrides.pop(get_catalog_store, None)


@pytest_asyncio.fixture()
async def page(client):
    """Open a storefront page session and return its path."""
    response = await client.get("/")
    assert response.status_code == 303
    return response.headers["location"]
