"""DTOs for provider (cluster) records (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderCreate:
    """Provider as supplied at registration time."""

    name: str
    host: str
    ca_data: str
    bearer_token: str = field(default="", repr=False)


@dataclass(frozen=True)
class ProviderResult:
    """Provider read-model.

    bearer_token is populated only by get_provider; list_providers leaves it None.
    """

    name: str
    host: str
    ca_data: str
    bearer_token: str | None = field(default=None, repr=False)
