"""Resource repository: deployed resources keyed by task, account and application."""

import logging

from sqlalchemy import select

from clouddriver.application.dtos.resource import ResourceCreate, ResourceResult
from clouddriver.domain.enums import ResourceField
from clouddriver.domain.exceptions import InvalidArgumentException
from clouddriver.infrastructure.persistence.models.resource import Resource
from clouddriver.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# Projection returned by list_resources_by_task.
_TASK_COLUMNS = (
    Resource.account_name,
    Resource.api_group,
    Resource.kind,
    Resource.name,
    Resource.namespace,
    Resource.resource_body,
    Resource.version,
)


def _resolve_fields(fields: tuple[str, ...]) -> list[str]:
    """Validate field names against the resource columns; keep first-seen order."""
    if not fields:
        raise InvalidArgumentException("no fields provided", argument="fields")
    names: list[str] = []
    for field in fields:
        try:
            name = ResourceField(field).value
        except ValueError:
            raise InvalidArgumentException(
                f"unknown resource field: {field!r}", argument="fields"
            ) from None
        if name not in names:
            names.append(name)
    return names


class ResourceRepository(BaseRepository):
    """Resource records. Implements IResourceRepository."""

    def record_resource(self, resource: ResourceCreate) -> None:
        self._insert(
            Resource(
                account_name=resource.account_name,
                spinnaker_app=resource.spinnaker_app,
                task_id=resource.task_id,
                api_group=resource.api_group,
                kind=resource.kind,
                name=resource.name,
                namespace=resource.namespace,
                resource_body=resource.resource_body,
                version=resource.version,
            ),
            "record_resource",
        )
        logger.debug(
            "Recorded resource %s/%s in %s for task %s",
            resource.kind,
            resource.name,
            resource.account_name,
            resource.task_id,
        )

    def list_resources_by_task(self, task_id: str) -> list[ResourceResult]:
        if not task_id:
            return []
        rows = self._rows(
            select(*_TASK_COLUMNS).where(Resource.task_id == task_id),
            "list_resources_by_task",
        )
        return [ResourceResult(**row._asdict()) for row in rows]

    def list_resources_by_fields(self, *fields: str) -> list[ResourceResult]:
        """Return the distinct combinations of the named fields across all resources.

        Only the requested fields are populated on each result.

        Raises:
            InvalidArgumentException: No fields given, or a name is not a resource column.
        """
        columns = [getattr(Resource, name) for name in _resolve_fields(fields)]
        rows = self._rows(
            select(*columns).group_by(*columns).order_by(*columns),
            "list_resources_by_fields",
        )
        return [ResourceResult(**row._asdict()) for row in rows]

    def list_accounts_by_application(self, spinnaker_app: str) -> list[str]:
        return self._scalars(
            select(Resource.account_name)
            .where(Resource.spinnaker_app == spinnaker_app)
            .group_by(Resource.account_name)
            .order_by(Resource.account_name),
            "list_accounts_by_application",
        )
