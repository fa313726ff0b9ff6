"""System-level routes such as health checks."""

from __future__ import annotations

import logging
from typing import Annotated

import redis.asyncio as redis
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from cocoacrest.config import settings
from cocoacrest.services.storage.key_value import RedisKeyValueStorage, get_redis_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


def _get_storage(
    client: Annotated[redis.Redis, Depends(get_redis_client)],
) -> RedisKeyValueStorage:
    return RedisKeyValueStorage(client)


@router.get("/health")
async def health_check(
    storage: Annotated[RedisKeyValueStorage, Depends(_get_storage)],
) -> dict[str, str]:
    """Health check endpoint with catalog storage connectivity check."""

    try:
        storage_status = "connected" if await storage.ping() else "disconnected"
    except RedisError:
        logger.debug("Catalog storage ping failed", exc_info=True)
        storage_status = "disconnected"

    return {
        "status": "healthy",
        "storage": storage_status,
        "environment": settings.ENVIRONMENT,
    }
