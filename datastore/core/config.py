"""
Configuration helpers for the datastore.

Exposes a Settings object read from environment variables (backing file,
backend selection, database URL, logging) so engines and routers do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

BACKEND_JSON = "json"
BACKEND_SQL = "sql"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: str
    storage_backend: str
    database_url: str
    log_level: str
    log_format: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: set[str], default: str) -> str:
        if value is None:
            return default
        value = value.strip().lower()
        return value if value in allowed else default

    return Settings(
        data_file=(os.getenv("DATA_FILE") or "data.json").strip(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or BACKEND_JSON).strip().lower(),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        log_format=_choice(os.getenv("LOG_FORMAT"), {"console", "json"}, "console"),
    )
