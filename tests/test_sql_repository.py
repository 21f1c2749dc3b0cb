"""
Smoke tests for the SQL engine against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from datastore.core.errors import InvalidResourceIdError, KeyFoundError, KeyNotFoundError, UnserializableDataError
from datastore.engines.base import DataType
from datastore.engines.sql_engine import SqlDataEngine
from datastore.repositories.sql_repository import ResourceRepository


@pytest.fixture()
def temp_db(tmp_path):
    """Build an engine over a temporary SQLite file and dispose it so the file is not kept locked."""
    db_file = tmp_path / "test.db"
    engine = SqlDataEngine(f"sqlite:///{db_file}")
    yield engine
    engine.close()


@pytest.mark.asyncio
async def test_put_get_delete_flow(temp_db):
    assert temp_db.name == "SQL"
    assert temp_db.data_type is DataType.DATABASE

    await temp_db.put("a", {"x": 1})
    with pytest.raises(KeyFoundError):
        await temp_db.put("a", {"x": 2})
    assert await temp_db.get("a") == {"x": 1}
    assert await temp_db.has("a") is True
    assert temp_db.size == 1

    await temp_db.delete("a")
    with pytest.raises(KeyNotFoundError):
        await temp_db.get("a")
    with pytest.raises(KeyNotFoundError):
        await temp_db.delete("a")
    assert await temp_db.has("a") is False
    assert temp_db.size == 0


@pytest.mark.asyncio
async def test_get_all_keeps_insertion_order(temp_db):
    await temp_db.put("b", [1, 2])
    await temp_db.put("a", "text")
    await temp_db.put("c", {"nested": {"ok": True}})
    assert await temp_db.get() == [("b", [1, 2]), ("a", "text"), ("c", {"nested": {"ok": True}})]


@pytest.mark.asyncio
async def test_put_rejects_empty_id(temp_db):
    with pytest.raises(InvalidResourceIdError):
        await temp_db.put("", 1)
    assert temp_db.size == 0


@pytest.mark.asyncio
async def test_data_survives_new_engine(tmp_path):
    url = f"sqlite:///{tmp_path / 'restart.db'}"
    first = SqlDataEngine(url)
    await first.put("k", {"v": 1})
    first.close()

    second = SqlDataEngine(url)
    try:
        assert await second.get("k") == {"v": 1}
    finally:
        second.close()


def test_repository_unique_constraint_maps_to_key_found(tmp_path):
    repo = ResourceRepository(f"sqlite:///{tmp_path / 'repo.db'}")
    try:
        repo.create("dup", 1)
        with pytest.raises(KeyFoundError):
            repo.create("dup", 2)
        assert repo.get("dup").data == 1
        assert repo.count() == 1
    finally:
        repo.dispose()


def test_missing_database_url_fails():
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        SqlDataEngine("")


def test_create_tables_script_builds_schema(tmp_path):
    from sqlalchemy import create_engine, inspect

    from datastore.db.create_tables import create_all

    url = f"sqlite:///{tmp_path / 'schema.db'}"
    create_all(url)
    engine = create_engine(url)
    try:
        assert "resources" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


@pytest.mark.asyncio
async def test_put_rejects_values_that_are_not_strict_json(temp_db):
    with pytest.raises(UnserializableDataError):
        await temp_db.put("nan", float("nan"))
    with pytest.raises(UnserializableDataError):
        await temp_db.put("set", {1, 2})
    assert temp_db.size == 0


@pytest.mark.asyncio
async def test_has_is_false_for_non_string_ids(temp_db):
    await temp_db.put("a", 1)
    assert await temp_db.has(["a"]) is False
    assert await temp_db.has(None) is False
