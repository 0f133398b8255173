"""Persistence: store handle, ORM models, and repositories."""

from clouddriver.infrastructure.persistence.database import Base, Database

__all__ = ["Base", "Database"]
