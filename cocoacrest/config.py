"""
Configuration settings for the storefront.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Catalog storage
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CATALOG_STORAGE_KEY: str = os.getenv(
        "CATALOG_STORAGE_KEY",
        "cocoacrest_products_v1",
    )

    # Admin mode. Plaintext shared secret, not an access-control boundary.
    ADMIN_PASSPHRASE: str = os.getenv("ADMIN_PASSPHRASE", "cocoacrest-admin")

    # Ordering
    INSTAGRAM_PROFILE_URL: str = os.getenv(
        "INSTAGRAM_PROFILE_URL",
        "https://www.instagram.com/cocoacrest/",
    )

    # View
    DISPLAY_PRICE_MULTIPLIER: float = float(
        os.getenv("DISPLAY_PRICE_MULTIPLIER", "90")
    )
    VIEW_SESSION_LIMIT: int = int(os.getenv("VIEW_SESSION_LIMIT", "1000"))

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self):
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"debug={self.debug}, log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
