"""Catalog store persisted as a single JSON document in key-value storage."""

from __future__ import annotations

import json
import logging
import math
import re
import time
from collections.abc import Callable

from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from cocoacrest.config import settings
from cocoacrest.models.product import (
    DEFAULT_CATEGORY,
    DEFAULT_COLOR,
    Product,
    ProductDraft,
)
from cocoacrest.services.browser.capabilities import Dialogs
from cocoacrest.services.catalog.defaults import default_products
from cocoacrest.services.storage.key_value import (
    KeyValueStorage,
    RedisKeyValueStorage,
    get_redis_client,
)

logger = logging.getLogger(__name__)

MISSING_NAME_ALERT = "Please add a product name."
REMOVE_CONFIRMATION = "Remove this chocolate?"

_PRODUCT_LIST = TypeAdapter(list[Product])
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def generate_product_id() -> str:
    """Timestamp-derived id; collisions are possible but unlikely."""

    return f"choc-{time.time_ns() // 1_000_000}"


def parse_price(raw: str) -> float:
    """Parse the leading number of raw input, falling back to 0."""

    match = _LEADING_NUMBER.match(raw or "")
    if match is None:
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def build_product(draft: ProductDraft, product_id: str) -> Product:
    return Product(
        id=product_id,
        name=draft.name.strip(),
        desc=draft.desc.strip(),
        price=parse_price(draft.price),
        category=draft.category.strip() or DEFAULT_CATEGORY,
        color=draft.color or DEFAULT_COLOR,
    )


class CatalogStore:
    """In-memory catalog mirrored to one storage key on every mutation.

    Concurrent writers are not reconciled: the last persisted list wins.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        *,
        id_factory: Callable[[], str] = generate_product_id,
    ) -> None:
        self._storage = storage
        self._key = key
        self._id_factory = id_factory
        self._products: list[Product] = []
        self._loaded = False

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    async def load(self) -> list[Product]:
        """Return the persisted catalog, or the seed when it is absent or unusable."""

        try:
            raw = await self._storage.get(self._key)
        except (RedisError, UnicodeDecodeError) as exc:
            logger.warning("Catalog storage unreadable, using defaults: %s", exc)
            return default_products()

        if not raw:
            return default_products()

        try:
            products = _PRODUCT_LIST.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as exc:
            logger.warning("Discarding unreadable catalog under %s: %s", self._key, exc)
            return default_products()

        if not products:
            return default_products()
        return products

    async def ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._products = await self.load()
        self._loaded = True
        logger.info(
            "Catalog loaded",
            extra={"storage_key": self._key, "product_count": len(self._products)},
        )

    async def persist(self) -> None:
        """Write the full catalog back; failures only get logged."""

        document = json.dumps([p.model_dump() for p in self._products])
        try:
            await self._storage.set(self._key, document)
        except RedisError as exc:
            logger.warning("Failed to save products: %s", exc)

    async def add(self, draft: ProductDraft, dialogs: Dialogs) -> Product | None:
        if not draft.name.strip():
            dialogs.alert(MISSING_NAME_ALERT)
            return None

        product = build_product(draft, self._id_factory())
        self._products.insert(0, product)
        await self.persist()
        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    async def remove(self, product_id: str, dialogs: Dialogs) -> bool:
        if not dialogs.confirm(REMOVE_CONFIRMATION):
            return False

        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            return False

        self._products = remaining
        await self.persist()
        logger.info("Removed product %s", product_id)
        return True


_catalog_store: CatalogStore | None = None


def _build_catalog_store() -> CatalogStore:
    return CatalogStore(
        RedisKeyValueStorage(get_redis_client()),
        settings.CATALOG_STORAGE_KEY,
    )


async def get_catalog_store() -> CatalogStore:
    """FastAPI dependency returning the process-wide, loaded catalog."""

    global _catalog_store
    if _catalog_store is None:
        _catalog_store = _build_catalog_store()
    await _catalog_store.ensure_loaded()
    return _catalog_store
