"""SQL engine: the same four operations over a ``resources`` table."""

from __future__ import annotations

import asyncio
from typing import Any

from datastore.core.config import get_settings
from datastore.core.errors import InvalidResourceIdError, KeyFoundError, KeyNotFoundError
from datastore.engines.base import DataEngine, DataFunction, DataFunctionGroup, DataFunctionType, DataType
from datastore.repositories.json_storage import ensure_serializable
from datastore.repositories.sql_repository import ResourceRepository


class SqlDataEngine(DataEngine):
    """Engine persisting every resource as a row; SQLAlchemy calls run in worker threads."""

    def __init__(self, database_url: str | None = None) -> None:
        super().__init__("SQL", DataType.DATABASE, DataFunctionGroup(
            DataFunction(DataFunctionType.GET, self._get),
            DataFunction(DataFunctionType.PUT, self._put),
            DataFunction(DataFunctionType.DEL, self._del),
            DataFunction(DataFunctionType.HAS, self._has),
        ))
        url = database_url if database_url is not None else get_settings().database_url
        self.repository = ResourceRepository(url)

    @property
    def size(self) -> int:
        return self.repository.count()

    def __repr__(self) -> str:
        url = self.repository.engine.url.render_as_string(hide_password=True)
        return f"SqlDataEngine(url={url!r})"

    def close(self) -> None:
        self.repository.dispose()

    async def _get(self, resource_id: str | None = None) -> Any:
        if resource_id is None:
            return await asyncio.to_thread(self.repository.list_all)
        entity = await asyncio.to_thread(self.repository.get, resource_id)
        if entity is None:
            raise KeyNotFoundError(resource_id)
        return entity.data

    async def _put(self, resource_id: str, resource_data: Any) -> None:
        if not isinstance(resource_id, str) or not resource_id:
            raise InvalidResourceIdError(resource_id)
        ensure_serializable(resource_id, resource_data)
        if await asyncio.to_thread(self.repository.exists, resource_id):
            raise KeyFoundError(resource_id)
        await asyncio.to_thread(self.repository.create, resource_id, resource_data)

    async def _del(self, resource_id: str) -> None:
        if not await asyncio.to_thread(self.repository.delete, resource_id):
            raise KeyNotFoundError(resource_id)

    async def _has(self, resource_id: str) -> bool:
        if not isinstance(resource_id, str):
            return False
        return await asyncio.to_thread(self.repository.exists, resource_id)
