"""Repository interfaces (ports) for the application layer.

Protocols define the contracts that storage implementations must fulfill.
Every allowed query is a named method; there is no generic query surface.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clouddriver.application.dtos.provider import ProviderCreate, ProviderResult
    from clouddriver.application.dtos.resource import ResourceCreate, ResourceResult


class IProviderRepository(Protocol):
    """Protocol for provider (cluster) records."""

    def register_provider(self, provider: ProviderCreate) -> None:
        """Insert a provider; ConstraintViolationException if the name exists."""

    def get_provider(self, name: str) -> ProviderResult:
        """Return host, CA data and bearer token; NotFoundException if absent."""

    def list_providers(self) -> list[ProviderResult]:
        """Return name, host and CA data of every provider; never the token."""


class IResourceRepository(Protocol):
    """Protocol for deployed-resource records."""

    def record_resource(self, resource: ResourceCreate) -> None:
        """Insert a resource row; duplicates are accepted."""

    def list_resources_by_task(self, task_id: str) -> list[ResourceResult]:
        """Return all resources recorded under a task id."""

    def list_resources_by_fields(self, *fields: str) -> list[ResourceResult]:
        """Return the distinct combinations of the named fields."""

    def list_accounts_by_application(self, spinnaker_app: str) -> list[str]:
        """Return distinct account names with resources tagged with the application."""


class IPermissionRepository(Protocol):
    """Protocol for read/write group assignments per account."""

    def grant_read(self, account_name: str, group: str) -> None:
        """Insert one read permission row."""

    def grant_write(self, account_name: str, group: str) -> None:
        """Insert one write permission row."""

    def list_read_groups(self, account_name: str) -> list[str]:
        """Return distinct read groups for the account; empty means no access."""

    def list_write_groups(self, account_name: str) -> list[str]:
        """Return distinct write groups for the account; empty means no access."""


class ICatalog(IProviderRepository, IResourceRepository, IPermissionRepository, Protocol):
    """The whole catalog contract consumed by the orchestration layer."""
