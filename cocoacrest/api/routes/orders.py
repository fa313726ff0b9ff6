"""Routes handing orders over to Instagram direct messages."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from cocoacrest.config import settings
from cocoacrest.models.effects import BrowserEffects
from cocoacrest.models.order import OrderHandoff, OrderRequest
from cocoacrest.services.browser.recorded import (
    RecordingClipboard,
    RecordingDialogs,
    RecordingNavigator,
)
from cocoacrest.services.catalog.store import CatalogStore, get_catalog_store
from cocoacrest.services.orders.dispatcher import OrderDispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

CatalogDependency = Annotated[CatalogStore, Depends(get_catalog_store)]


@router.post(
    "/{product_id}",
    response_model=OrderHandoff,
    status_code=status.HTTP_200_OK,
    summary="Prepare an Instagram DM order for a product",
)
async def order_on_instagram(
    product_id: str,
    catalog: CatalogDependency,
    payload: OrderRequest | None = None,
) -> OrderHandoff:
    """Build the order message and the browser effects that deliver it.

    The browser reports whether it can write to the clipboard. When it can,
    the effects copy the message, open the profile and confirm with an alert.
    Otherwise they open the profile and show the message in a prompt.
    """
    product = catalog.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Unknown product")

    payload = payload or OrderRequest()
    effects = BrowserEffects()
    dispatcher = OrderDispatcher(
        clipboard=RecordingClipboard(effects, available=payload.clipboard_available),
        navigator=RecordingNavigator(effects),
        dialogs=RecordingDialogs(effects),
        profile_url=settings.INSTAGRAM_PROFILE_URL,
    )
    message, copied = await dispatcher.dispatch(product)

    logger.info(
        "[order-handoff]",
        extra={"product_id": product.id, "copied": copied},
    )

    return OrderHandoff(
        product_id=product.id,
        message=message,
        profile_url=dispatcher.profile_url,
        copied=copied,
        effects=effects,
    )
