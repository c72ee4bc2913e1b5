"""
Selerara Dashboard API — Application Configuration
====================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, database.py and the middleware.
When:  Loaded once at module import time.

Database credentials follow the variable names the dashboard deployments
already use (DB_HOST, DB_USER, DB_PASSWORD, DB_NAME). DATABASE_URL, when set,
wins over the individual parts; tests use it to point at SQLite.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="selerara")

    # What: SQLAlchemy dialect+driver used when assembling the URL from parts
    db_driver: str = Field(default="mysql+aiomysql")

    # What: Full URL override, e.g. sqlite+aiosqlite:///./test.db
    database_url: Optional[str] = Field(default=None)

    # What: Maximum simultaneously open connections
    # Why 10: Matches the connection limit the dashboard database is sized for
    db_pool_size: int = Field(default=10, ge=1, le=100)

    # What: Seconds a request waits for a free connection; None waits forever
    # Trade-off: Unbounded waits never fail under load but can build a backlog
    db_pool_timeout: Optional[float] = Field(default=None, gt=0)

    # What: Validates connections before use (catches stale connections after a DB restart)
    db_pool_pre_ping: bool = Field(default=True)

    # What: Recycle connections older than this many seconds
    # Why: MySQL drops idle connections after wait_timeout (8h by default)
    db_pool_recycle: int = Field(default=3600, ge=60)

    @property
    def database_url_resolved(self) -> URL:
        """
        What: The SQLAlchemy URL the engine connects to.
        How:  DATABASE_URL if provided, otherwise assembled from the DB_* parts.
        Why URL.create: Escapes special characters in passwords correctly.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    # ── HTTP ──────────────────────────────────────────────────────────────
    # What: Prefix every route is mounted under
    # Values: "/api" (current deployment) or "" (legacy unprefixed deployment)
    api_prefix: str = Field(default="/api")

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Ensures the prefix starts with '/' and has no trailing slash."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    # What: Server URL advertised in the OpenAPI document
    public_url: str = Field(default="https://api-v2.selera-rasa-sunda.id")

    # What: Allowed origins for cross-origin requests (comma-separated)
    # Why "*": The dashboard is embedded in several front-ends; any origin is reflected
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # What: Controls logging verbosity
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DB_HOST and db_host both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
