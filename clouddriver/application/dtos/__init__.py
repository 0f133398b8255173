"""Application DTOs: plain dataclasses passed across the catalog boundary."""

from clouddriver.application.dtos.provider import ProviderCreate, ProviderResult
from clouddriver.application.dtos.resource import ResourceCreate, ResourceResult

__all__ = ["ProviderCreate", "ProviderResult", "ResourceCreate", "ResourceResult"]
