"""Server-rendered storefront page and its form actions."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from cocoacrest.models.effects import BrowserEffects
from cocoacrest.models.product import ProductDraft
from cocoacrest.models.view import ViewState
from cocoacrest.services.admin_controller import AdminController, get_admin_controller
from cocoacrest.services.browser.recorded import RecordingDialogs
from cocoacrest.services.catalog.store import CatalogStore, get_catalog_store
from cocoacrest.services.view import actions
from cocoacrest.services.view.rendering import build_page_context, templates
from cocoacrest.services.view.session_registry import (
    ViewSessionRegistry,
    get_session_registry,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["storefront"])

RegistryDependency = Annotated[ViewSessionRegistry, Depends(get_session_registry)]
CatalogDependency = Annotated[CatalogStore, Depends(get_catalog_store)]
AdminDependency = Annotated[AdminController, Depends(get_admin_controller)]


class UnknownSession(Exception):
    """The page session expired or never existed."""


def _get_state(session_id: str, registry: RegistryDependency) -> ViewState:
    state = registry.get(session_id)
    if state is None:
        raise UnknownSession(session_id)
    return state


StateDependency = Annotated[ViewState, Depends(_get_state)]


def _require_admin(state: StateDependency) -> ViewState:
    if not state.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin mode is not enabled for this page",
        )
    return state


AdminStateDependency = Annotated[ViewState, Depends(_require_admin)]


CATALOG_ANCHOR = "catalog"


def _back_to_page(state: ViewState, anchor: str | None = None) -> RedirectResponse:
    url = f"/s/{state.session_id}"
    if anchor:
        url = f"{url}#{anchor}"
    return RedirectResponse(
        url=url,
        status_code=status.HTTP_303_SEE_OTHER,
    )


def _queue_alerts(state: ViewState, effects: BrowserEffects) -> None:
    state.notices.extend(effects.alerts)


@router.get("/", summary="Open the storefront in a fresh page session")
async def open_storefront(registry: RegistryDependency) -> RedirectResponse:
    state = registry.create()
    logger.debug("Created page session %s", state.session_id)
    return _back_to_page(state)


@router.get(
    "/s/{session_id}",
    response_class=HTMLResponse,
    summary="Render the storefront for a page session",
)
async def render_storefront(
    request: Request,
    state: StateDependency,
    catalog: CatalogDependency,
) -> HTMLResponse:
    context = build_page_context(state, catalog.products)
    return templates.TemplateResponse(request, "storefront.html", context)


@router.post("/s/{session_id}/search")
async def search(
    state: StateDependency,
    q: Annotated[str, Form()] = "",
) -> RedirectResponse:
    actions.set_search(state, q)
    return _back_to_page(state)


@router.post("/s/{session_id}/category")
async def choose_category(
    state: StateDependency,
    category: Annotated[str, Form()],
    jump: Annotated[bool, Form()] = False,
) -> RedirectResponse:
    """Hero shortcuts set jump so the page opens at the product grid."""
    actions.choose_category(state, category)
    return _back_to_page(state, CATALOG_ANCHOR if jump else None)


@router.post("/s/{session_id}/menu")
async def toggle_menu(state: StateDependency) -> RedirectResponse:
    actions.toggle_menu(state)
    return _back_to_page(state)


@router.post("/s/{session_id}/select/{product_id}")
async def select_product(
    product_id: str,
    state: StateDependency,
    catalog: CatalogDependency,
) -> RedirectResponse:
    if catalog.get(product_id) is None:
        raise HTTPException(status_code=404, detail="Unknown product")
    actions.select_product(state, product_id)
    return _back_to_page(state)


@router.post("/s/{session_id}/dismiss")
async def dismiss(state: StateDependency) -> RedirectResponse:
    actions.close_overlays(state)
    return _back_to_page(state)


@router.post("/s/{session_id}/admin")
async def toggle_admin(
    state: StateDependency,
    controller: AdminDependency,
    passphrase: Annotated[str, Form()] = "",
) -> RedirectResponse:
    effects = BrowserEffects()
    controller.toggle(state, passphrase, RecordingDialogs(effects))
    _queue_alerts(state, effects)
    return _back_to_page(state)


@router.post("/s/{session_id}/admin/exit")
async def exit_admin(
    state: StateDependency,
    controller: AdminDependency,
) -> RedirectResponse:
    controller.exit(state)
    return _back_to_page(state)


@router.post("/s/{session_id}/admin/products")
async def add_product(
    state: AdminStateDependency,
    catalog: CatalogDependency,
    draft: Annotated[ProductDraft, Form()],
) -> RedirectResponse:
    effects = BrowserEffects()
    product = await catalog.add(draft, RecordingDialogs(effects))
    if product is None:
        # keep what was typed so the form can be corrected
        state.draft = draft
    else:
        state.draft = ProductDraft()
    _queue_alerts(state, effects)
    return _back_to_page(state)


@router.post("/s/{session_id}/admin/products/{product_id}/remove")
async def remove_product(
    product_id: str,
    state: AdminStateDependency,
    catalog: CatalogDependency,
    confirmed: Annotated[bool, Form()] = False,
) -> RedirectResponse:
    effects = BrowserEffects()
    await catalog.remove(product_id, RecordingDialogs(effects, confirmed=confirmed))
    _queue_alerts(state, effects)
    return _back_to_page(state)
