"""
Engine contract shared by every storage backend.

An engine is a name, a storage medium tag and a group of four registered
operations (GET/PUT/DEL/HAS). Callers talk to the dispatching coroutines on
``DataEngine`` and never to a backend's functions directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable


class DataType(str, Enum):
    """Storage medium an engine persists to."""

    FILE = "file"
    DATABASE = "database"
    MEMORY = "memory"


class DataFunctionType(str, Enum):
    GET = "get"
    PUT = "put"
    DEL = "del"
    HAS = "has"


@dataclass(frozen=True)
class DataFunction:
    """Pairs an operation tag with the coroutine function implementing it."""

    type: DataFunctionType
    func: Callable[..., Awaitable[Any]]


class DataFunctionGroup:
    """The full set of operations an engine registers, one per type."""

    def __init__(self, *functions: DataFunction) -> None:
        registered: dict[DataFunctionType, Callable[..., Awaitable[Any]]] = {}
        for function in functions:
            if function.type in registered:
                raise ValueError(f"Operation {function.type.name} registered twice")
            registered[function.type] = function.func
        missing = [t.name for t in DataFunctionType if t not in registered]
        if missing:
            raise ValueError(f"Missing operations: {', '.join(missing)}")
        self._functions = registered

    def __getitem__(self, function_type: DataFunctionType) -> Callable[..., Awaitable[Any]]:
        return self._functions[function_type]

    def __iter__(self):
        return iter(self._functions.items())


class DataEngine(ABC):
    """Base class binding a backend's operations to the common interface."""

    def __init__(self, name: str, data_type: DataType, functions: DataFunctionGroup) -> None:
        self.name = name
        self.data_type = data_type
        self.functions = functions

    async def get(self, resource_id: str | None = None) -> Any:
        """Return one resource's data, or every (id, data) pair when no id is given."""
        return await self.functions[DataFunctionType.GET](resource_id)

    async def put(self, resource_id: str, resource_data: Any) -> None:
        """Insert a new resource. Existing ids are never overwritten."""
        return await self.functions[DataFunctionType.PUT](resource_id, resource_data)

    async def delete(self, resource_id: str) -> None:
        return await self.functions[DataFunctionType.DEL](resource_id)

    async def has(self, resource_id: str) -> bool:
        return await self.functions[DataFunctionType.HAS](resource_id)

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of resources the engine holds."""
