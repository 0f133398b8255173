"""Pytest configuration and fixtures for clouddriver.

Database-backed fixtures use a SQLite file under tmp_path so the pooled
engine behaves like a real server-backed one (connections are shared).
"""

from collections.abc import Iterator

import pytest

from clouddriver.application.services.catalog_service import CatalogService
from clouddriver.core.config import get_settings
from clouddriver.infrastructure.persistence.database import Database

_SETTINGS_ENV = (
    "DATABASE_URL",
    "SQL_USER",
    "SQL_PASSWORD",
    "SQL_HOST",
    "SQL_NAME",
    "DEBUG",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove settings env vars and clear the cached Settings around the test."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'clouddriver.db'}"


@pytest.fixture
def database(database_url: str) -> Iterator[Database]:
    """Store handle with the catalog tables created."""
    db = Database(database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def catalog(database: Database) -> CatalogService:
    return CatalogService.from_database(database)
