"""
Embedded key-value store mirrored to a JSON file.

Engines share one contract (get/put/delete/has) so the JSON file backend and
the SQL backend can be swapped behind the same interface.
"""

from datastore.core.errors import (
    CorruptStoreError,
    DataEngineError,
    InvalidResourceIdError,
    KeyFoundError,
    KeyNotFoundError,
    PersistenceError,
    UnserializableDataError,
)
from datastore.engines import build_engine
from datastore.engines.base import DataEngine, DataFunction, DataFunctionGroup, DataFunctionType, DataType
from datastore.engines.json_engine import JsonDataEngine
from datastore.engines.sql_engine import SqlDataEngine

__all__ = [
    "CorruptStoreError",
    "DataEngine",
    "DataEngineError",
    "DataFunction",
    "DataFunctionGroup",
    "DataFunctionType",
    "DataType",
    "InvalidResourceIdError",
    "JsonDataEngine",
    "KeyFoundError",
    "KeyNotFoundError",
    "PersistenceError",
    "SqlDataEngine",
    "UnserializableDataError",
    "build_engine",
]
