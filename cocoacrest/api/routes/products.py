"""Read-only JSON routes over the catalog."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from cocoacrest.models.product import Product
from cocoacrest.models.view import ALL_CATEGORIES
from cocoacrest.services.catalog.filtering import derive_categories, filter_products
from cocoacrest.services.catalog.store import CatalogStore, get_catalog_store
from cocoacrest.services.view.placeholder import placeholder_svg

router = APIRouter(prefix="/products", tags=["products"])

CatalogDependency = Annotated[CatalogStore, Depends(get_catalog_store)]


@router.get(
    "",
    response_model=list[Product],
    summary="List products matching a category and search text",
)
async def list_products(
    catalog: CatalogDependency,
    category: Annotated[str, Query()] = ALL_CATEGORIES,
    q: Annotated[str, Query()] = "",
) -> list[Product]:
    return filter_products(catalog.products, category, q)


@router.get("/categories", response_model=list[str])
async def list_categories(catalog: CatalogDependency) -> list[str]:
    """Category chips: "All" then each category in first-seen order."""

    return derive_categories(catalog.products)


def _get_product(product_id: str, catalog: CatalogDependency) -> Product:
    product = catalog.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Unknown product")
    return product


@router.get("/{product_id}", response_model=Product)
async def read_product(
    product: Annotated[Product, Depends(_get_product)],
) -> Product:
    return product


@router.get("/{product_id}/image.svg", summary="Generated placeholder image")
async def read_product_image(
    product: Annotated[Product, Depends(_get_product)],
) -> Response:
    return Response(
        content=placeholder_svg(product.name, product.color),
        media_type="image/svg+xml",
    )
