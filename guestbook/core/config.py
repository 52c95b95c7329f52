"""
Configuration helpers for the guestbook backend.

Settings are read once from environment variables; storage selection
(memory, sql or json) happens only here, never in calling code.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    database_url: str
    json_store_path: str
    strict_updates: bool
    log_level: str
    log_file: str | None
    host: str = "127.0.0.1"
    port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "memory").strip().lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./guestbook.db").strip(),
        json_store_path=os.getenv("JSON_STORE_PATH", "./guestbook.json"),
        strict_updates=_bool(os.getenv("STRICT_UPDATES"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
