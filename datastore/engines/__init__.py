"""Storage engines and the factory choosing one from settings."""
from __future__ import annotations

from datastore.core.config import BACKEND_JSON, BACKEND_SQL, Settings, get_settings
from datastore.engines.base import DataEngine
from datastore.engines.json_engine import JsonDataEngine
from datastore.engines.sql_engine import SqlDataEngine


def build_engine(settings: Settings | None = None) -> DataEngine:
    settings = settings or get_settings()
    if settings.storage_backend == BACKEND_JSON:
        return JsonDataEngine(settings.data_file)
    if settings.storage_backend == BACKEND_SQL:
        return SqlDataEngine(settings.database_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
