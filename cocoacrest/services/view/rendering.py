"""Template setup and the page context derived from catalog and view state."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates

from cocoacrest.config import settings
from cocoacrest.models.product import Product
from cocoacrest.models.view import ViewState
from cocoacrest.services.catalog.filtering import derive_categories, filter_products
from cocoacrest.services.view.actions import take_notices
from cocoacrest.services.view.placeholder import placeholder_data_uri

UI_DIRECTORY = Path(__file__).resolve().parent.parent.parent / "ui"


def display_price(price: float) -> str:
    """Price shown on cards, scaled by the display multiplier."""

    return f"₹{price * settings.DISPLAY_PRICE_MULTIPLIER:.0f}"


def base_price(price: float) -> str:
    return f"₹{price:.2f}"


def _build_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(UI_DIRECTORY / "templates"))
    templates.env.filters["display_price"] = display_price
    templates.env.filters["base_price"] = base_price
    templates.env.globals["placeholder"] = placeholder_data_uri
    return templates


templates = _build_templates()


def build_page_context(state: ViewState, products: list[Product]) -> dict[str, Any]:
    """Everything the storefront template needs, computed from state alone.

    Pending notices are consumed, so they render exactly once.
    """

    selected = None
    if state.selected_id is not None:
        selected = next((p for p in products if p.id == state.selected_id), None)

    return {
        "state": state,
        "categories": derive_categories(products),
        "products": products,
        "visible": filter_products(products, state.active_category, state.search),
        "selected": selected,
        "notices": take_notices(state),
        "profile_url": settings.INSTAGRAM_PROFILE_URL,
    }
