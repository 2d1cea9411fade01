"""
Configuration helpers for the student records app.

Settings are read from environment variables once and cached, so routers and
services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_title: str
    database_url: str
    db_echo: bool
    auto_create_tables: bool
    log_level: str
    host: str
    port: int


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        app_title=os.getenv("APP_TITLE", "Student Records"),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./students.db").strip(),
        db_echo=_bool(os.getenv("DB_ECHO_SQL"), False),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
