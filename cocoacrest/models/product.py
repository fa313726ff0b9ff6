"""Product domain models and API schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_CATEGORY = "General"
DEFAULT_COLOR = "#6b3f1f"
DRAFT_COLOR = "#7b3e23"


class Product(BaseModel):
    """A chocolate shown in the catalog."""

    id: str = Field(..., description="Opaque identifier of the product")
    name: str = Field(..., min_length=1)
    desc: str = ""
    price: float = Field(0, ge=0, description="Base price of a single piece")
    category: str = DEFAULT_CATEGORY
    color: str = Field(
        DEFAULT_COLOR,
        description="Color used for the generated placeholder image",
    )


class ProductDraft(BaseModel):
    """Raw values typed into the admin add-form."""

    name: str = ""
    desc: str = ""
    price: str = ""
    category: str = ""
    color: str = DRAFT_COLOR
