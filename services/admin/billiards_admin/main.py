"""Entry point for the billiards admin FastAPI application."""

import logging

from fastapi import FastAPI

from billiards_admin.api.v1 import router as api_router
from billiards_admin.core.config import settings
from billiards_admin.core.error_handlers import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/admin/v1")

__all__ = ["app"]
