"""Capability implementations that record effects for the browser to replay.

The server decides what should happen in the visitor's browser and returns it
as a ``BrowserEffects`` payload. The page script then performs the clipboard
write, the navigation and the dialogs in the recorded order.
"""

from __future__ import annotations

from cocoacrest.models.effects import BrowserEffects, OpenUrl, PromptRequest
from cocoacrest.services.browser.capabilities import (
    Clipboard,
    ClipboardUnavailableError,
    Dialogs,
    Navigator,
)


class RecordingClipboard(Clipboard):
    """Clipboard that succeeds only when the browser reported support for it."""

    def __init__(self, effects: BrowserEffects, *, available: bool) -> None:
        self._effects = effects
        self._available = available

    async def write_text(self, text: str) -> None:
        if not self._available:
            raise ClipboardUnavailableError("Clipboard is not available")
        self._effects.clipboard_text = text


class RecordingNavigator(Navigator):
    def __init__(self, effects: BrowserEffects) -> None:
        self._effects = effects

    def open(self, url: str, target: str = "_blank") -> None:
        self._effects.open_urls.append(OpenUrl(url=url, target=target))


class RecordingDialogs(Dialogs):
    """Dialogs collected for display; confirm answers come from the request."""

    def __init__(self, effects: BrowserEffects, *, confirmed: bool = False) -> None:
        self._effects = effects
        self._confirmed = confirmed

    def alert(self, message: str) -> None:
        self._effects.alerts.append(message)

    def confirm(self, message: str) -> bool:
        return self._confirmed

    def prompt(self, message: str, default: str = "") -> None:
        self._effects.prompt = PromptRequest(message=message, default=default)
