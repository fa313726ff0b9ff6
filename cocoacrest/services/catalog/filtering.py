"""Category and free-text filtering over the catalog."""

from __future__ import annotations

from collections.abc import Iterable

from cocoacrest.models.product import Product
from cocoacrest.models.view import ALL_CATEGORIES


def matches(product: Product, active_category: str, search_text: str) -> bool:
    if active_category != ALL_CATEGORIES and product.category != active_category:
        return False
    haystack = (product.name + product.desc + product.category).lower()
    return search_text.lower() in haystack


def filter_products(
    products: Iterable[Product],
    active_category: str = ALL_CATEGORIES,
    search_text: str = "",
) -> list[Product]:
    """Return the products visible for a category and search text, in order."""

    return [p for p in products if matches(p, active_category, search_text)]


def derive_categories(products: Iterable[Product]) -> list[str]:
    """Return "All" followed by the distinct categories in first-seen order."""

    categories = [ALL_CATEGORIES]
    for product in products:
        if product.category not in categories:
            categories.append(product.category)
    return categories
