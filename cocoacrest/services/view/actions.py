"""State transitions triggered by storefront UI events."""

from __future__ import annotations

from cocoacrest.models.view import ViewState


def set_search(state: ViewState, text: str) -> None:
    state.search = text


def choose_category(state: ViewState, category: str) -> None:
    state.active_category = category
    state.mobile_menu_open = False


def select_product(state: ViewState, product_id: str) -> None:
    state.selected_id = product_id


def toggle_menu(state: ViewState) -> None:
    state.mobile_menu_open = not state.mobile_menu_open


def close_overlays(state: ViewState) -> None:
    """Escape key: close the detail overlay and the mobile drawer."""

    state.selected_id = None
    state.mobile_menu_open = False


def take_notices(state: ViewState) -> list[str]:
    """Return pending alerts and clear them so they show only once."""

    notices, state.notices = state.notices, []
    return notices
