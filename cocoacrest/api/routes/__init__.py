"""API route registration."""

from fastapi import FastAPI

from cocoacrest.api.routes import orders, products, storefront, system


def include_api_routes(app: FastAPI) -> None:
    """Attach all API routers to the application."""

    app.include_router(system.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(storefront.router)
