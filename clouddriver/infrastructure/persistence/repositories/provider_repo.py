"""Provider repository: registered clusters and their connection details."""

import logging

from sqlalchemy import select

from clouddriver.application.dtos.provider import ProviderCreate, ProviderResult
from clouddriver.domain.exceptions import NotFoundException
from clouddriver.infrastructure.persistence.models.provider import Provider
from clouddriver.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProviderRepository(BaseRepository):
    """Provider records. Implements IProviderRepository."""

    def register_provider(self, provider: ProviderCreate) -> None:
        self._insert(
            Provider(
                name=provider.name,
                host=provider.host,
                ca_data=provider.ca_data,
                bearer_token=provider.bearer_token,
            ),
            "register_provider",
        )
        logger.info("Registered provider %s (host=%s)", provider.name, provider.host)

    def get_provider(self, name: str) -> ProviderResult:
        """Return the provider with its bearer token, for opening a cluster connection.

        Raises:
            NotFoundException: No provider with this name.
        """
        row = self._first(
            select(Provider.host, Provider.ca_data, Provider.bearer_token)
            .where(Provider.name == name)
            .limit(1),
            "get_provider",
        )
        if row is None:
            raise NotFoundException("provider", name)
        return ProviderResult(
            name=name,
            host=row.host,
            ca_data=row.ca_data,
            bearer_token=row.bearer_token,
        )

    def list_providers(self) -> list[ProviderResult]:
        """Return every provider without its bearer token (column is never selected)."""
        rows = self._rows(
            select(Provider.name, Provider.host, Provider.ca_data).order_by(Provider.name),
            "list_providers",
        )
        return [ProviderResult(name=r.name, host=r.host, ca_data=r.ca_data) for r in rows]
