"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from cocoacrest.api.routes import include_api_routes
from cocoacrest.api.routes.storefront import UnknownSession
from cocoacrest.config import settings
from cocoacrest.services.catalog.store import get_catalog_store
from cocoacrest.services.view.rendering import UI_DIRECTORY

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog once at startup so the first visitor does not wait."""
    store = await get_catalog_store()
    logger.info(
        "Storefront ready with %d products (environment=%s)",
        len(store.products),
        settings.ENVIRONMENT,
    )

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Cocoacrest Storefront",
        description="Chocolate showcase with Instagram DM ordering",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_cors(app)
    _configure_exception_handlers(app)
    _mount_static(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow broad access in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _configure_exception_handlers(app: FastAPI) -> None:
    """Expired page sessions start over on a fresh page."""

    async def restart_session(request: Request, exc: UnknownSession) -> RedirectResponse:
        logger.debug("Unknown page session %s, starting a new one", exc)
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)

    app.add_exception_handler(UnknownSession, restart_session)


def _mount_static(app: FastAPI) -> None:
    """Serve the page script used to replay browser effects."""

    app.mount(
        "/static",
        StaticFiles(directory=UI_DIRECTORY / "static"),
        name="static",
    )
