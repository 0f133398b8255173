"""Application services."""

from clouddriver.application.services.catalog_service import CatalogService

__all__ = ["CatalogService"]
