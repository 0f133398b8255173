"""Catalog service: one object exposing providers, resources and permissions.

Pure delegation to the three repositories so the orchestration layer depends
on a single ICatalog. Holds no state of its own beyond the repositories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clouddriver.infrastructure.persistence.repositories import (
    PermissionRepository,
    ProviderRepository,
    ResourceRepository,
)

if TYPE_CHECKING:
    from clouddriver.application.dtos.provider import ProviderCreate, ProviderResult
    from clouddriver.application.dtos.resource import ResourceCreate, ResourceResult
    from clouddriver.application.interfaces.repositories import (
        IPermissionRepository,
        IProviderRepository,
        IResourceRepository,
    )
    from clouddriver.infrastructure.persistence.database import Database


class CatalogService:
    """Implements ICatalog over a provider, resource and permission repository."""

    def __init__(
        self,
        providers: IProviderRepository,
        resources: IResourceRepository,
        permissions: IPermissionRepository,
    ) -> None:
        self._providers = providers
        self._resources = resources
        self._permissions = permissions

    @classmethod
    def from_database(cls, database: Database) -> CatalogService:
        """Wire the SQL repositories onto one store handle."""
        factory = database.session_factory
        return cls(
            ProviderRepository(factory),
            ResourceRepository(factory),
            PermissionRepository(factory),
        )

    # Providers

    def register_provider(self, provider: ProviderCreate) -> None:
        self._providers.register_provider(provider)

    def get_provider(self, name: str) -> ProviderResult:
        return self._providers.get_provider(name)

    def list_providers(self) -> list[ProviderResult]:
        return self._providers.list_providers()

    # Resources

    def record_resource(self, resource: ResourceCreate) -> None:
        self._resources.record_resource(resource)

    def list_resources_by_task(self, task_id: str) -> list[ResourceResult]:
        return self._resources.list_resources_by_task(task_id)

    def list_resources_by_fields(self, *fields: str) -> list[ResourceResult]:
        return self._resources.list_resources_by_fields(*fields)

    def list_accounts_by_application(self, spinnaker_app: str) -> list[str]:
        return self._resources.list_accounts_by_application(spinnaker_app)

    # Permissions

    def grant_read(self, account_name: str, group: str) -> None:
        self._permissions.grant_read(account_name, group)

    def grant_write(self, account_name: str, group: str) -> None:
        self._permissions.grant_write(account_name, group)

    def list_read_groups(self, account_name: str) -> list[str]:
        return self._permissions.list_read_groups(account_name)

    def list_write_groups(self, account_name: str) -> list[str]:
        return self._permissions.list_write_groups(account_name)
