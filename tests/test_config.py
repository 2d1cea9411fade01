from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from studentapp.core import config as core_config  # noqa: E402


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("DATABASE_URL", " sqlite:///./other.db ")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "no")
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.app_env == "prod"
    assert settings.database_url == "sqlite:///./other.db"
    assert settings.auto_create_tables is False
    assert settings.port == 8000
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "DATABASE_URL", "AUTO_CREATE_TABLES", "DB_ECHO_SQL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.app_env == "dev"
    assert settings.database_url == "sqlite:///./students.db"
    assert settings.auto_create_tables is True
    assert settings.db_echo is False
