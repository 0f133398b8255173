"""Application ports (protocols)."""

from clouddriver.application.interfaces.repositories import (
    ICatalog,
    IPermissionRepository,
    IProviderRepository,
    IResourceRepository,
)

__all__ = [
    "ICatalog",
    "IPermissionRepository",
    "IProviderRepository",
    "IResourceRepository",
]
