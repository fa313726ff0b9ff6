"""Seed catalog used when nothing usable is persisted."""

from __future__ import annotations

from cocoacrest.models.product import Product

_DEFAULT_PRODUCTS: tuple[dict, ...] = (
    {
        "id": "choc-01",
        "name": "Midnight Truffle",
        "desc": "70% dark chocolate ganache with a whisper of sea salt.",
        "price": 4.5,
        "category": "Dark",
        "color": "#3b2f2f",
    },
    {
        "id": "choc-02",
        "name": "Silky Caramel",
        "desc": "Smooth caramel center, milk chocolate coating.",
        "price": 3.9,
        "category": "Milk",
        "color": "#8b5e3c",
    },
    {
        "id": "choc-03",
        "name": "Hazelnut Crunch",
        "desc": "Toasted hazelnuts with crunchy pearls.",
        "price": 5.25,
        "category": "Nutty",
        "color": "#6b3f1f",
    },
    {
        "id": "choc-04",
        "name": "Ruby Raspberry",
        "desc": "Tangy raspberry cream wrapped in ruby chocolate.",
        "price": 5.0,
        "category": "Fruit",
        "color": "#b33a5b",
    },
    {
        "id": "choc-05",
        "name": "Matcha Bliss",
        "desc": "White chocolate meets premium matcha powder.",
        "price": 4.75,
        "category": "Exotic",
        "color": "#6b8b4b",
    },
    {
        "id": "choc-06",
        "name": "Cocoa Crunch Bar",
        "desc": "Crispy rice, cacao nibs and a milk chocolate hug.",
        "price": 2.95,
        "category": "Bar",
        "color": "#6d3b2b",
    },
)


def default_products() -> list[Product]:
    """Return a fresh copy of the seed catalog."""

    return [Product(**item) for item in _DEFAULT_PRODUCTS]
