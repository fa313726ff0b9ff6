"""Schemas describing side effects the browser replays after an action."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OpenUrl(BaseModel):
    """A navigation the browser should perform."""

    url: str
    target: str = "_blank"


class PromptRequest(BaseModel):
    """A blocking prompt pre-filled with a value the user can copy."""

    message: str
    default: str = ""


class BrowserEffects(BaseModel):
    """Clipboard, navigation and dialog effects, in the order they apply."""

    clipboard_text: str | None = Field(
        None,
        description="Text to place on the visitor's clipboard",
    )
    open_urls: list[OpenUrl] = Field(default_factory=list)
    alerts: list[str] = Field(default_factory=list)
    prompt: PromptRequest | None = None
