from __future__ import annotations

import pytest

from datastore.core.config import Settings, get_settings
from datastore.engines import build_engine
from datastore.engines.base import DataEngine, DataFunction, DataFunctionGroup, DataFunctionType, DataType
from datastore.engines.json_engine import JsonDataEngine
from datastore.engines.sql_engine import SqlDataEngine


async def _noop(*args):
    return None


def _group(*types):
    return DataFunctionGroup(*(DataFunction(t, _noop) for t in types))


class _MemoryEngine(DataEngine):
    @property
    def size(self) -> int:
        return 0


def test_group_requires_every_operation():
    with pytest.raises(ValueError, match="HAS"):
        _group(DataFunctionType.GET, DataFunctionType.PUT, DataFunctionType.DEL)


def test_group_rejects_duplicates():
    with pytest.raises(ValueError, match="twice"):
        _group(*DataFunctionType, DataFunctionType.GET)


@pytest.mark.asyncio
async def test_engine_dispatches_to_registered_functions():
    calls = []

    async def fake_get(resource_id=None):
        calls.append(("get", resource_id))
        return "value"

    async def fake_put(resource_id, data):
        calls.append(("put", resource_id, data))

    async def fake_del(resource_id):
        calls.append(("del", resource_id))

    async def fake_has(resource_id):
        calls.append(("has", resource_id))
        return True

    engine = _MemoryEngine("FAKE", DataType.MEMORY, DataFunctionGroup(
        DataFunction(DataFunctionType.GET, fake_get),
        DataFunction(DataFunctionType.PUT, fake_put),
        DataFunction(DataFunctionType.DEL, fake_del),
        DataFunction(DataFunctionType.HAS, fake_has),
    ))
    assert await engine.get("a") == "value"
    await engine.put("a", {"x": 1})
    await engine.delete("a")
    assert await engine.has("a") is True
    assert calls == [("get", "a"), ("put", "a", {"x": 1}), ("del", "a"), ("has", "a")]


def test_build_engine_defaults_to_json(tmp_path):
    engine = build_engine()
    assert isinstance(engine, JsonDataEngine)
    assert engine.path == tmp_path / "data.json"


def test_build_engine_reads_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'env.db'}")
    get_settings.cache_clear()
    engine = build_engine()
    try:
        assert isinstance(engine, SqlDataEngine)
    finally:
        engine.close()


def test_build_engine_rejects_unknown_backend():
    settings = Settings(
        data_file="data.json",
        storage_backend="redis",
        database_url="",
        log_level="INFO",
        log_format="console",
    )
    with pytest.raises(ValueError, match="redis"):
        build_engine(settings)


def test_settings_defaults():
    settings = get_settings()
    assert settings.data_file == "data.json"
    assert settings.storage_backend == "json"
    assert settings.database_url == ""
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"


def test_settings_ignore_unknown_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    monkeypatch.setenv("DATA_FILE", "custom.json")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.log_format == "console"
    assert settings.data_file == "custom.json"


def test_json_engine_from_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_FILE", "stores/main.json")
    get_settings.cache_clear()
    engine = JsonDataEngine.from_settings()
    assert engine.path == tmp_path / "stores" / "main.json"
    assert engine.path.exists()


def test_engine_without_size_cannot_be_created():
    class Incomplete(DataEngine):
        pass

    with pytest.raises(TypeError, match="size"):
        Incomplete("BROKEN", DataType.MEMORY, _group(*DataFunctionType))
