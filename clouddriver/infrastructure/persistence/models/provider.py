"""Provider ORM model. A registered Kubernetes cluster connection."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clouddriver.infrastructure.persistence.database import Base
from clouddriver.infrastructure.persistence.models.mixins import CreatedAtMixin


class Provider(CreatedAtMixin, Base):
    """Kubernetes provider (account). Table: providers. Primary key: name.

    bearer_token is stored as-is; list queries never select it.
    """

    __tablename__ = "providers"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    host: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    ca_data: Mapped[str] = mapped_column(Text, nullable=False, default="")
    bearer_token: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
