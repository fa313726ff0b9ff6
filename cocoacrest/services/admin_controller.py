"""Passphrase-gated admin mode.

The passphrase is compared as a plaintext literal with no lockout or hashing.
It only hides the catalog editing controls and is not an access-control
mechanism.
"""

from __future__ import annotations

import logging

from cocoacrest.config import settings
from cocoacrest.models.view import AdminMode, ViewState
from cocoacrest.services.browser.capabilities import Dialogs

logger = logging.getLogger(__name__)

WRONG_PASSPHRASE_ALERT = "Enter correct admin passphrase to enable admin controls."


class AdminController:
    """Two-state machine: disabled and enabled."""

    def __init__(self, passphrase: str) -> None:
        self._passphrase = passphrase

    def unlock(self, state: ViewState, passphrase: str, dialogs: Dialogs) -> AdminMode:
        if state.is_admin:
            return state.admin_mode
        if passphrase != self._passphrase:
            dialogs.alert(WRONG_PASSPHRASE_ALERT)
            return state.admin_mode

        state.admin_mode = AdminMode.ENABLED
        logger.info("Admin mode enabled", extra={"session_id": state.session_id})
        return state.admin_mode

    def exit(self, state: ViewState) -> AdminMode:
        state.admin_mode = AdminMode.DISABLED
        return state.admin_mode

    def toggle(self, state: ViewState, passphrase: str, dialogs: Dialogs) -> AdminMode:
        """Header button: leave admin mode when on, otherwise try to unlock."""

        if state.is_admin:
            return self.exit(state)
        return self.unlock(state, passphrase, dialogs)


def get_admin_controller() -> AdminController:
    return AdminController(settings.ADMIN_PASSPHRASE)
