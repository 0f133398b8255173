"""Application lifespan: startup and shutdown.

Builds the store handle from settings, creates the catalog tables and
publishes the CatalogService on app.state; disposes the pool on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from clouddriver.application.services.catalog_service import CatalogService
from clouddriver.core.config import get_settings
from clouddriver.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()

    # ---- Startup ----
    database = Database.from_settings(settings)
    database.create_all()
    app.state.database = database
    app.state.catalog = CatalogService.from_database(database)
    logger.info("Catalog ready")

    yield

    # ---- Shutdown ----
    app.state.catalog = None
    app.state.database = None
    database.dispose()
