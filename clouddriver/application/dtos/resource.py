"""DTOs for deployed resources (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceCreate:
    """One deployed Kubernetes object, as recorded after a deployment action."""

    account_name: str
    spinnaker_app: str
    task_id: str
    api_group: str
    kind: str
    name: str
    namespace: str
    resource_body: str
    version: str


@dataclass(frozen=True)
class ResourceResult:
    """Resource read-model. Fields outside a query's projection are None."""

    account_name: str | None = None
    spinnaker_app: str | None = None
    task_id: str | None = None
    api_group: str | None = None
    kind: str | None = None
    name: str | None = None
    namespace: str | None = None
    resource_body: str | None = None
    version: str | None = None
