"""In-memory registry of storefront page sessions."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from threading import RLock

from cocoacrest.config import settings
from cocoacrest.models.view import ViewState

logger = logging.getLogger(__name__)


class ViewSessionRegistry:
    """Holds one ViewState per open page; nothing survives a restart.

    Once the limit is reached the least recently used session is dropped.
    """

    def __init__(self, limit: int) -> None:
        self._lock = RLock()
        self._limit = max(1, limit)
        self._sessions: OrderedDict[str, ViewState] = OrderedDict()

    def create(self) -> ViewState:
        state = ViewState(session_id=uuid.uuid4().hex)
        with self._lock:
            self._sessions[state.session_id] = state
            while len(self._sessions) > self._limit:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("Evicted page session %s", evicted)
        return state

    def get(self, session_id: str) -> ViewState | None:
        with self._lock:
            state = self._sessions.get(session_id)
            if state is not None:
                self._sessions.move_to_end(session_id)
            return state

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_registry = ViewSessionRegistry(settings.VIEW_SESSION_LIMIT)


def get_session_registry() -> ViewSessionRegistry:
    """FastAPI dependency factory."""

    return _registry
