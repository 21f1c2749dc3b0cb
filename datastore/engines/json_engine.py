"""JSON file engine: an in-memory dict mirrored to a single JSON file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from datastore.core.config import get_settings
from datastore.core.errors import InvalidResourceIdError, KeyFoundError, KeyNotFoundError
from datastore.engines.base import DataEngine, DataFunction, DataFunctionGroup, DataFunctionType, DataType
from datastore.repositories.json_storage import JsonFileStorage, ensure_serializable

DEFAULT_FILENAME = "data.json"


class JsonDataEngine(DataEngine):
    """
    Store backed by a JSON file under the current working directory.

    Mutations are applied to memory first and persisted second. When the file
    write fails a PersistenceError reaches the caller but the mutation stays in memory;
    ``flush()`` retries the write.
    """

    def __init__(self, filename: str = DEFAULT_FILENAME) -> None:
        super().__init__("JSON", DataType.FILE, DataFunctionGroup(
            DataFunction(DataFunctionType.GET, self._get),
            DataFunction(DataFunctionType.PUT, self._put),
            DataFunction(DataFunctionType.DEL, self._del),
            DataFunction(DataFunctionType.HAS, self._has),
        ))
        self.path = (Path.cwd() / filename).resolve()
        self._storage = JsonFileStorage(self.path)
        self._data: dict[str, Any] = {}
        for resource_id, resource_data in self._storage.load().items():
            self._data[resource_id] = resource_data

    @classmethod
    def from_settings(cls) -> "JsonDataEngine":
        return cls(get_settings().data_file)

    @property
    def size(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"JsonDataEngine(path={str(self.path)!r}, data={self._data!r})"

    async def flush(self) -> None:
        await self._storage.save(self._data)

    # -------------------------- operations --------------------------
    async def _get(self, resource_id: str | None = None) -> Any:
        if resource_id is None:
            return list(self._data.items())
        if resource_id not in self._data:
            raise KeyNotFoundError(resource_id)
        return self._data[resource_id]

    async def _put(self, resource_id: str, resource_data: Any) -> None:
        if not isinstance(resource_id, str) or not resource_id:
            raise InvalidResourceIdError(resource_id)
        if resource_id in self._data:
            raise KeyFoundError(resource_id)
        ensure_serializable(resource_id, resource_data)
        self._data[resource_id] = resource_data
        await self._storage.save(self._data)

    async def _del(self, resource_id: str) -> None:
        if resource_id not in self._data:
            raise KeyNotFoundError(resource_id)
        del self._data[resource_id]
        await self._storage.save(self._data)

    async def _has(self, resource_id: str) -> bool:
        return isinstance(resource_id, str) and resource_id in self._data
