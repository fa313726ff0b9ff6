"""Hand orders over to the Instagram direct-message channel."""

from __future__ import annotations

import logging

from cocoacrest.models.product import Product
from cocoacrest.services.browser.capabilities import (
    Clipboard,
    ClipboardUnavailableError,
    Dialogs,
    Navigator,
)

logger = logging.getLogger(__name__)

COPIED_ALERT = (
    "A pre-filled message was copied to your clipboard. "
    "Open the profile and paste it in a DM to place your order."
)
MANUAL_COPY_PROMPT = "Copy this message and send it in Instagram DM:"


def build_order_message(product: Product) -> str:
    return (
        f"Hi Cocoacrest! I'd like to order: {product.name} "
        f"(₹{product.price:.2f}) — please let me know availability "
        "and delivery details."
    )


class OrderDispatcher:
    """Copies the order message and opens the shop's profile.

    One attempt per click: a clipboard failure falls back to showing the
    message in a prompt for manual copying.
    """

    def __init__(
        self,
        *,
        clipboard: Clipboard,
        navigator: Navigator,
        dialogs: Dialogs,
        profile_url: str,
    ) -> None:
        self._clipboard = clipboard
        self._navigator = navigator
        self._dialogs = dialogs
        self._profile_url = profile_url

    @property
    def profile_url(self) -> str:
        return self._profile_url

    async def dispatch(self, product: Product) -> tuple[str, bool]:
        """Return the message and whether it reached the clipboard."""

        message = build_order_message(product)
        try:
            await self._clipboard.write_text(message)
        except ClipboardUnavailableError as exc:
            logger.info(
                "Clipboard unavailable, falling back to manual copy: %s",
                exc,
                extra={"product_id": product.id},
            )
            self._navigator.open(self._profile_url, "_blank")
            self._dialogs.prompt(MANUAL_COPY_PROMPT, message)
            return message, False

        self._navigator.open(self._profile_url, "_blank")
        self._dialogs.alert(COPIED_ALERT)
        logger.info("Order message copied", extra={"product_id": product.id})
        return message, True
