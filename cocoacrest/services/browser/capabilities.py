"""Narrow interfaces over the browser APIs the storefront relies on."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClipboardUnavailableError(RuntimeError):
    """Raised when the clipboard refuses or does not support a write."""


class Clipboard(ABC):
    """System clipboard of the visitor."""

    @abstractmethod
    async def write_text(self, text: str) -> None:
        """Place plain text on the clipboard.

        Raises:
            ClipboardUnavailableError: If permission is denied or the
                clipboard is not supported.
        """


class Navigator(ABC):
    """Opens pages in new browsing contexts."""

    @abstractmethod
    def open(self, url: str, target: str = "_blank") -> None:
        """Open the URL in the given target."""


class Dialogs(ABC):
    """Blocking alert, confirm and prompt dialogs."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a message the user must acknowledge."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question and return the answer."""

    @abstractmethod
    def prompt(self, message: str, default: str = "") -> None:
        """Show a text field pre-filled with default."""
