"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SQL connection parts are optional; when any is missing
the catalog falls back to a local SQLite file.
"""

import logging
from functools import lru_cache
from urllib.parse import urlsplit

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


def _split_host(value: str) -> tuple[str, int | None]:
    """Split SQL_HOST ("host", "host:port" or "[v6]:port") into host and port.

    Raises ValueError when the port is not a number in 0-65535.
    """
    parts = urlsplit(f"//{value}")
    return parts.hostname or value, parts.port


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "clouddriver"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: explicit URL wins over the SQL_* parts below
    database_url: str = ""
    database_echo: bool = False
    sql_user: str = ""
    sql_password: SecretStr = SecretStr("")
    sql_host: str = ""
    sql_name: str = ""
    sqlite_path: str = "clouddriver.db"

    # Connection pool bounds
    db_max_open_conns: int = 5
    db_max_idle_conns: int = 1
    db_conn_max_lifetime: int = 30  # seconds
    db_pool_timeout: int = 30  # seconds a caller waits for a free connection

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_pool_bounds(self) -> "Settings":
        """Pool bounds must describe a usable pool."""
        if self.db_max_open_conns < 1:
            raise ValueError("DB_MAX_OPEN_CONNS must be at least 1.")
        if not 0 <= self.db_max_idle_conns <= self.db_max_open_conns:
            raise ValueError(
                "DB_MAX_IDLE_CONNS must be between 0 and DB_MAX_OPEN_CONNS."
            )
        if self.db_conn_max_lifetime < 1:
            raise ValueError("DB_CONN_MAX_LIFETIME must be a positive number of seconds.")
        if self.sql_host:
            try:
                _split_host(self.sql_host)
            except ValueError:
                raise ValueError(
                    f"SQL_HOST must be host or host:port, got: {self.sql_host!r}"
                ) from None
        return self

    def connection_url(self) -> str | URL:
        """Return the SQLAlchemy URL for the catalog database.

        Order: DATABASE_URL, then MySQL built from SQL_USER/SQL_PASSWORD/
        SQL_HOST/SQL_NAME, then the local SQLite file.
        """
        if self.database_url:
            return self.database_url
        password = self.sql_password.get_secret_value()
        if not (self.sql_user and password and self.sql_host and self.sql_name):
            logger.warning(
                "SQL config missing field - defaulting to local sqlite DB (%s)",
                self.sqlite_path,
            )
            return f"sqlite:///{self.sqlite_path}"
        host, port = _split_host(self.sql_host)
        return URL.create(
            "mysql+pymysql",
            username=self.sql_user,
            password=password,
            host=host,
            port=port,
            database=self.sql_name,
            query={"charset": "utf8mb4"},
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
