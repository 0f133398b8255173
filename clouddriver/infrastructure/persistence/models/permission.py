"""ReadPermission and WritePermission ORM models.

Two symmetric tables rather than one table with a mode column. Neither has
a uniqueness constraint; group lookups de-duplicate on read.
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from clouddriver.infrastructure.persistence.database import Base
from clouddriver.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)


class ReadPermission(CuidMixin, CreatedAtMixin, Base):
    """Group allowed to read an account's resources. Table: read_permissions."""

    __tablename__ = "read_permissions"

    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    read_group: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (Index("ix_read_permissions_account", "account_name"),)


class WritePermission(CuidMixin, CreatedAtMixin, Base):
    """Group allowed to write an account's resources. Table: write_permissions."""

    __tablename__ = "write_permissions"

    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    write_group: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (Index("ix_write_permissions_account", "account_name"),)
