"""Resource ORM model. One deployed Kubernetes object recorded per deployment task."""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clouddriver.infrastructure.persistence.database import Base
from clouddriver.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)


class Resource(CuidMixin, CreatedAtMixin, Base):
    """Deployed resource. Table: resources. Append-only, no natural-key uniqueness."""

    __tablename__ = "resources"

    account_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    spinnaker_app: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    task_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    api_group: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    kind: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    namespace: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    resource_body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    version: Mapped[str] = mapped_column(String(64), nullable=False, default="")

    __table_args__ = (
        Index("ix_resources_task_id", "task_id"),
        Index("ix_resources_spinnaker_app", "spinnaker_app"),
    )
