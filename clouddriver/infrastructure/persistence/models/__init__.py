"""Persistence models: ORM entities and mixins."""

from clouddriver.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)
from clouddriver.infrastructure.persistence.models.permission import (
    ReadPermission,
    WritePermission,
)
from clouddriver.infrastructure.persistence.models.provider import Provider
from clouddriver.infrastructure.persistence.models.resource import Resource

__all__ = [
    "CreatedAtMixin",
    "CuidMixin",
    "Provider",
    "ReadPermission",
    "Resource",
    "WritePermission",
]
