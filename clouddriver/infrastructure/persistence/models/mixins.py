"""SQLAlchemy mixins shared by the append-only catalog tables.

Provides: CuidMixin (surrogate CUID2 primary key) and CreatedAtMixin.
"""

from datetime import datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

generate_cuid = cuid_wrapper()


class CuidMixin:
    """Mixin for rows with no natural key. Provides id with default CUID2."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(32), primary_key=True, default=generate_cuid)


class CreatedAtMixin:
    """Mixin for created_at (server default, timezone-aware). Rows are never updated."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )
