"""Store handle: pool bounds, schema bootstrap, and backend failure translation."""

import pytest
from sqlalchemy.pool import QueuePool

from clouddriver.application.services.catalog_service import CatalogService
from clouddriver.core.config import Settings
from clouddriver.domain.exceptions import BackendUnavailableException
from clouddriver.infrastructure.persistence.database import Database

pytestmark = pytest.mark.requires_db


def test_pool_bounds_follow_settings(database_url: str) -> None:
    db = Database.from_settings(Settings(_env_file=None, database_url=database_url))
    try:
        pool = db.engine.pool
        assert isinstance(pool, QueuePool)
        assert pool.size() == 1
        assert pool._max_overflow == 4
        assert pool._recycle == 30
    finally:
        db.dispose()


def test_memory_sqlite_shares_one_connection() -> None:
    db = Database("sqlite://")
    try:
        db.create_all()
        catalog = CatalogService.from_database(db)
        catalog.grant_read("cluster-a", "devs")
        assert catalog.list_read_groups("cluster-a") == ["devs"]
    finally:
        db.dispose()


def test_ping(database: Database) -> None:
    database.ping()


def test_missing_tables_surface_as_backend_unavailable(database_url: str) -> None:
    db = Database(database_url)
    try:
        with pytest.raises(BackendUnavailableException) as exc_info:
            CatalogService.from_database(db).list_providers()
        assert exc_info.value.details["operation"] == "list_providers"
        assert exc_info.value.__cause__ is not None
    finally:
        db.dispose()


def test_exhausted_pool_is_backend_unavailable(database_url: str) -> None:
    db = Database(database_url, max_open_conns=1, max_idle_conns=1, pool_timeout=1)
    db.create_all()
    catalog = CatalogService.from_database(db)
    try:
        held = db.engine.connect()
        try:
            with pytest.raises(BackendUnavailableException):
                catalog.list_read_groups("cluster-a")
        finally:
            held.close()
        # Connection returned: the pool serves callers again.
        assert catalog.list_read_groups("cluster-a") == []
    finally:
        db.dispose()
