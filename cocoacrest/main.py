"""FastAPI application entry point."""

import uvicorn

from cocoacrest.application import create_app
from cocoacrest.config import settings

app = create_app()


def run() -> None:
    """Serve the storefront with uvicorn."""

    uvicorn.run(
        "cocoacrest.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

__all__ = ["app", "run"]
