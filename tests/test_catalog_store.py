"""Tests for the persisted catalog store."""

import json

import pytest
from fakeredis import FakeServer
from fakeredis import aioredis as fakeredis
from redis.exceptions import ConnectionError as RedisConnectionError

from cocoacrest.config import settings
from cocoacrest.models.product import Product, ProductDraft
from cocoacrest.services.catalog.defaults import default_products
from cocoacrest.services.catalog.store import (
    MISSING_NAME_ALERT,
    CatalogStore,
    parse_price,
)
from cocoacrest.services.storage.key_value import KeyValueStorage, RedisKeyValueStorage

KEY = settings.CATALOG_STORAGE_KEY


class _BrokenStorage(KeyValueStorage):
    """Storage whose every call fails like an unreachable Redis."""

    def __init__(self):
        self.writes = 0

    async def get(self, key):
        raise RedisConnectionError("storage down")

    async def set(self, key, value):
        self.writes += 1
        raise RedisConnectionError("storage down")


@pytest.mark.asyncio
async def test_load_returns_defaults_when_nothing_persisted(store):
    assert await store.load() == default_products()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    ["not json", "[]", "{}", '"text"', '[{"id": "x"}]', "null"],
)
async def test_load_discards_unusable_values(store, redis_client, raw):
    await redis_client.set(KEY, raw)

    assert await store.load() == default_products()


@pytest.mark.asyncio
async def test_load_falls_back_when_storage_unreachable():
    store = CatalogStore(_BrokenStorage(), KEY)

    assert await store.load() == default_products()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [b"\xff", b'[{"id": "x", "name": "\xff"}]'],
)
async def test_load_falls_back_when_stored_bytes_are_not_utf8(raw):
    server = FakeServer()
    writer = fakeredis.FakeRedis(server=server)
    reader = fakeredis.FakeRedis(server=server, decode_responses=True)
    await writer.set(KEY, raw)
    try:
        store = CatalogStore(RedisKeyValueStorage(reader), KEY)

        await store.ensure_loaded()

        assert store.products == default_products()
    finally:
        await writer.aclose()
        await reader.aclose()


class _BytesStorage(KeyValueStorage):
    def __init__(self, raw):
        self._raw = raw

    async def get(self, key):
        return self._raw

    async def set(self, key, value):
        self._raw = value


@pytest.mark.asyncio
async def test_load_falls_back_when_raw_bytes_fail_to_parse():
    store = CatalogStore(_BytesStorage(b"[\xff]"), KEY)

    assert await store.load() == default_products()


@pytest.mark.asyncio
async def test_persist_then_load_round_trip(store, storage, dialogs):
    await store.ensure_loaded()
    await store.add(ProductDraft(name="Pecan Swirl", price="6.1", color="#aa5500"), dialogs)

    reloaded = await CatalogStore(storage, KEY).load()

    assert reloaded == store.products


@pytest.mark.asyncio
async def test_load_keeps_persisted_catalog(store, redis_client):
    custom = [
        Product(id="x-1", name="Orange Peel", price=3, category="Fruit", color="#f80"),
    ]
    await redis_client.set(KEY, json.dumps([p.model_dump() for p in custom]))

    await store.ensure_loaded()

    assert store.products == custom


@pytest.mark.asyncio
async def test_add_prepends_and_persists(store, redis_client, dialogs):
    await store.ensure_loaded()

    product = await store.add(
        ProductDraft(name="  Pecan Swirl ", desc=" Buttery ", price="7.5", category="Nutty"),
        dialogs,
    )

    assert product is not None
    assert store.products[0] == product
    assert product.name == "Pecan Swirl"
    assert product.desc == "Buttery"
    assert product.price == 7.5
    assert len(store.products) == 7
    persisted = json.loads(await redis_client.get(KEY))
    assert persisted[0]["name"] == "Pecan Swirl"


@pytest.mark.asyncio
async def test_add_uses_generated_id(store, dialogs):
    await store.ensure_loaded()

    product = await store.add(ProductDraft(name="Pecan Swirl"), dialogs)

    assert product.id == "choc-test-1"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
async def test_add_blank_name_alerts_without_mutation(store, redis_client, dialogs, effects, name):
    await store.ensure_loaded()

    result = await store.add(ProductDraft(name=name, price="3"), dialogs)

    assert result is None
    assert len(store.products) == 6
    assert effects.alerts == [MISSING_NAME_ALERT]
    assert await redis_client.get(KEY) is None


@pytest.mark.asyncio
async def test_add_invalid_price_becomes_zero(store, dialogs):
    await store.ensure_loaded()

    product = await store.add(ProductDraft(name="Pecan Swirl", price="abc"), dialogs)

    assert product.price == 0


@pytest.mark.asyncio
async def test_add_without_category_uses_general(store, dialogs):
    await store.ensure_loaded()

    product = await store.add(ProductDraft(name="Pecan Swirl", category="  "), dialogs)

    assert product.category == "General"


@pytest.mark.asyncio
async def test_add_without_color_uses_fallback(store, dialogs):
    await store.ensure_loaded()

    product = await store.add(ProductDraft(name="Pecan Swirl", color=""), dialogs)

    assert product.color == "#6b3f1f"


@pytest.mark.asyncio
async def test_remove_requires_confirmation(store, redis_client, dialogs):
    await store.ensure_loaded()

    removed = await store.remove("choc-01", dialogs)

    assert removed is False
    assert store.get("choc-01") is not None
    assert await redis_client.get(KEY) is None


@pytest.mark.asyncio
async def test_remove_confirmed_drops_product(store, redis_client, confirming_dialogs):
    await store.ensure_loaded()

    removed = await store.remove("choc-01", confirming_dialogs)

    assert removed is True
    assert store.get("choc-01") is None
    assert len(store.products) == 5
    persisted = json.loads(await redis_client.get(KEY))
    assert "choc-01" not in {item["id"] for item in persisted}


@pytest.mark.asyncio
async def test_remove_unknown_id_is_noop(store, confirming_dialogs):
    await store.ensure_loaded()
    before = store.products

    removed = await store.remove("does-not-exist", confirming_dialogs)

    assert removed is False
    assert store.products == before


@pytest.mark.asyncio
async def test_persist_failure_keeps_memory_authoritative(dialogs, caplog):
    storage = _BrokenStorage()
    store = CatalogStore(storage, KEY)
    await store.ensure_loaded()

    product = await store.add(ProductDraft(name="Pecan Swirl"), dialogs)

    assert product is not None
    assert store.products[0] == product
    assert storage.writes == 1
    assert "Failed to save products" in caplog.text


@pytest.mark.asyncio
async def test_ensure_loaded_reads_storage_once(store, redis_client, dialogs):
    await store.ensure_loaded()
    await redis_client.set(KEY, "[]")

    await store.ensure_loaded()

    assert len(store.products) == 6


@pytest.mark.asyncio
async def test_last_write_wins_between_stores(storage, dialogs):
    first = CatalogStore(storage, KEY)
    second = CatalogStore(storage, KEY)
    await first.ensure_loaded()
    await second.ensure_loaded()

    await first.add(ProductDraft(name="From first"), dialogs)
    await second.add(ProductDraft(name="From second"), dialogs)

    names = [p.name for p in await CatalogStore(storage, KEY).load()]
    assert "From second" in names
    assert "From first" not in names


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("4.5", 4.5),
        ("4.5abc", 4.5),
        (" 12 ", 12.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("abc", 0.0),
        ("", 0.0),
        ("-3", 0.0),
        ("inf", 0.0),
        ("NaN", 0.0),
    ],
)
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected
