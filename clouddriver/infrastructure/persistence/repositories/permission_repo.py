"""Permission repository: read and write groups per account."""

import logging

from sqlalchemy import select

from clouddriver.infrastructure.persistence.models.permission import (
    ReadPermission,
    WritePermission,
)
from clouddriver.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PermissionRepository(BaseRepository):
    """Read/write group assignments. Implements IPermissionRepository.

    An account with no rows yields an empty group list; callers treat that as no access.
    """

    def grant_read(self, account_name: str, group: str) -> None:
        self._insert(
            ReadPermission(account_name=account_name, read_group=group), "grant_read"
        )
        logger.info("Granted read on account %s to group %s", account_name, group)

    def grant_write(self, account_name: str, group: str) -> None:
        self._insert(
            WritePermission(account_name=account_name, write_group=group), "grant_write"
        )
        logger.info("Granted write on account %s to group %s", account_name, group)

    def list_read_groups(self, account_name: str) -> list[str]:
        return self._scalars(
            select(ReadPermission.read_group)
            .where(ReadPermission.account_name == account_name)
            .group_by(ReadPermission.read_group)
            .order_by(ReadPermission.read_group),
            "list_read_groups",
        )

    def list_write_groups(self, account_name: str) -> list[str]:
        return self._scalars(
            select(WritePermission.write_group)
            .where(WritePermission.account_name == account_name)
            .group_by(WritePermission.write_group)
            .order_by(WritePermission.write_group),
            "list_write_groups",
        )
