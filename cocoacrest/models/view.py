"""UI state held for one storefront page session."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from cocoacrest.models.product import ProductDraft

ALL_CATEGORIES = "All"


class AdminMode(str, Enum):
    """States of the admin toggle."""

    DISABLED = "disabled"
    ENABLED = "enabled"


class ViewState(BaseModel):
    """Everything the page renders besides the catalog itself."""

    session_id: str
    search: str = ""
    active_category: str = ALL_CATEGORIES
    selected_id: str | None = None
    mobile_menu_open: bool = False
    admin_mode: AdminMode = AdminMode.DISABLED
    draft: ProductDraft = Field(default_factory=ProductDraft)
    notices: list[str] = Field(
        default_factory=list,
        description="Alerts waiting to be shown on the next render",
    )

    @property
    def is_admin(self) -> bool:
        return self.admin_mode is AdminMode.ENABLED
