"""Base repository: session-per-call helpers with backend error translation."""

from typing import Any

from sqlalchemy import Row, Select
from sqlalchemy.orm import Session, sessionmaker

from clouddriver.infrastructure.persistence.database import Base
from clouddriver.infrastructure.persistence.errors import translate_errors


class BaseRepository:
    """Runs each operation as one statement in its own short-lived session.

    Writes commit on success and roll back on failure; reads never commit.
    Backend errors leave through translate_errors as domain exceptions.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    def _insert(self, obj: Base, operation: str) -> None:
        """Persist one new row in its own transaction."""
        with translate_errors(operation), self.session_factory.begin() as session:
            session.add(obj)

    def _rows(self, stmt: Select[Any], operation: str) -> list[Row[Any]]:
        """Execute a select and return all rows."""
        with translate_errors(operation), self.session_factory() as session:
            return list(session.execute(stmt).all())

    def _first(self, stmt: Select[Any], operation: str) -> Row[Any] | None:
        """Execute a select and return the first row, or None."""
        with translate_errors(operation), self.session_factory() as session:
            return session.execute(stmt).first()

    def _scalars(self, stmt: Select[Any], operation: str) -> list[Any]:
        """Execute a single-column select and return its values."""
        with translate_errors(operation), self.session_factory() as session:
            return list(session.scalars(stmt).all())
