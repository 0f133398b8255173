"""Persistence repositories. Re-exports for composition."""

from clouddriver.infrastructure.persistence.repositories.base import BaseRepository
from clouddriver.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from clouddriver.infrastructure.persistence.repositories.provider_repo import (
    ProviderRepository,
)
from clouddriver.infrastructure.persistence.repositories.resource_repo import (
    ResourceRepository,
)

__all__ = [
    "BaseRepository",
    "PermissionRepository",
    "ProviderRepository",
    "ResourceRepository",
]
