"""Schemas used by the order hand-off API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cocoacrest.models.effects import BrowserEffects


class OrderRequest(BaseModel):
    """Request payload sent when a visitor clicks an order button."""

    clipboard_available: bool = Field(
        True,
        description="Whether the browser can write to the system clipboard",
    )


class OrderHandoff(BaseModel):
    """Outcome of handing an order over to the Instagram DM channel."""

    product_id: str
    message: str
    profile_url: str
    copied: bool = Field(
        ...,
        description="True when the message was placed on the clipboard",
    )
    effects: BrowserEffects
