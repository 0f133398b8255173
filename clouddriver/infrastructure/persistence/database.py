"""Persistence: engine, session factory, and Base for SQLAlchemy ORM.

The catalog's store handle is an explicitly constructed Database passed to
the repositories; there is no module-level engine. Each repository call
opens a short-lived session from the handle's session factory.

Pool bounds: at most db_max_open_conns connections are open at once, of
which db_max_idle_conns stay in the pool when idle; every connection is
recycled after db_conn_max_lifetime seconds. Callers block up to
db_pool_timeout seconds waiting for a free connection.
"""

import logging
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from clouddriver.core.config import Settings
from clouddriver.domain.exceptions import BackendUnavailableException

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Database:
    """Store handle: owns the engine (connection pool) and session factory."""

    def __init__(
        self,
        url: str | URL,
        *,
        echo: bool = False,
        max_open_conns: int = 5,
        max_idle_conns: int = 1,
        conn_max_lifetime: int = 30,
        pool_timeout: int = 30,
    ) -> None:
        sa_url = make_url(url)
        engine_kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if _is_memory_sqlite(sa_url):
            # One shared connection, otherwise every checkout sees an empty database.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            # QueuePool treats pool_size=0 as unbounded.
            pool_size = max(1, min(max_idle_conns, max_open_conns))
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_open_conns - pool_size,
                pool_recycle=conn_max_lifetime,
                pool_timeout=pool_timeout,
            )
        self.engine: Engine = create_engine(sa_url, **engine_kwargs)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(
            "Database engine created (backend=%s, max_open_conns=%d)",
            sa_url.get_backend_name(),
            max_open_conns,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the store handle from application settings."""
        return cls(
            settings.connection_url(),
            echo=settings.database_echo,
            max_open_conns=settings.db_max_open_conns,
            max_idle_conns=settings.db_max_idle_conns,
            conn_max_lifetime=settings.db_conn_max_lifetime,
            pool_timeout=settings.db_pool_timeout,
        )

    def create_all(self) -> None:
        """Create the catalog tables if they do not exist."""
        # Register models on Base.metadata.
        from clouddriver.infrastructure.persistence import models  # noqa: F401

        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise BackendUnavailableException("create_all", str(exc)) from exc

    def ping(self) -> None:
        """Run a trivial query; raise BackendUnavailableException on failure."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise BackendUnavailableException("ping", str(exc)) from exc

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()
        logger.info("Database engine disposed")
