"""Configuration for the billiards admin service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Billiards Admin")

    POS_API_URL: str = os.getenv("POS_API_URL", "http://localhost:8080/api")
    POS_API_TOKEN: str = os.getenv("POS_API_TOKEN", "")
    POS_API_TIMEOUT: float = float(os.getenv("POS_API_TIMEOUT", "10"))

    # Upper bound on parallel active-session lookups during a table refresh.
    SESSION_FETCH_CONCURRENCY: int = int(os.getenv("SESSION_FETCH_CONCURRENCY", "8"))

    INVOICE_PAGE_SIZE: int = int(os.getenv("INVOICE_PAGE_SIZE", "10"))
    PRODUCT_PAGE_SIZE: int = int(os.getenv("PRODUCT_PAGE_SIZE", "10"))
    PRODUCT_FETCH_SIZE: int = int(os.getenv("PRODUCT_FETCH_SIZE", "100"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
