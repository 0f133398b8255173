"""Request-scoped access to the catalog built at startup.

CatalogDep is the injection point for orchestration routes mounted on the
app returned by create_app(); this package ships only the health routes.
"""

from typing import Annotated

from fastapi import Depends, Request

from clouddriver.application.services.catalog_service import CatalogService
from clouddriver.domain.exceptions import BackendUnavailableException


def get_catalog(request: Request) -> CatalogService:
    """Return the CatalogService stored on app.state by the lifespan.

    Raises BackendUnavailableException when the app was started without one.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise BackendUnavailableException("get_catalog", "catalog not initialized")
    return catalog


CatalogDep = Annotated[CatalogService, Depends(get_catalog)]
