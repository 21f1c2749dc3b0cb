"""
JSON file persistence adapter.

Keeps the backing file in sync with an engine's in-memory store: loads it
once on startup and rewrites it in full after every mutation.
"""

from __future__ import annotations

import asyncio
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import structlog

from datastore.core.errors import CorruptStoreError, PersistenceError, UnserializableDataError

logger = structlog.get_logger(__name__)

INDENT = 4


def dumps(data: Any) -> str:
    """Serialize to strict JSON (NaN and Infinity are rejected)."""
    return json.dumps(data, ensure_ascii=False, indent=INDENT, allow_nan=False)


def ensure_serializable(resource_id: str, resource_data: Any) -> None:
    try:
        dumps(resource_data)
    except (TypeError, ValueError) as exc:
        raise UnserializableDataError(resource_id, str(exc)) from exc


def _write_atomic(path: Path, payload: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class JsonFileStorage:
    """Reads and writes a single JSON object file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        # writes complete in the order saves were issued
        self._write_lock = asyncio.Lock()

    def load(self) -> dict[str, Any]:
        """
        Return the stored entries in file order, creating an empty file when
        none exists yet.
        """
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dumps({}), encoding="utf-8")
            logger.debug("store_created", path=str(self.path))
            return {}

        with self.path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise CorruptStoreError(str(self.path), str(exc)) from exc
        if not isinstance(data, dict):
            raise CorruptStoreError(str(self.path), f"expected an object, got {type(data).__name__}")
        logger.debug("store_loaded", path=str(self.path), size=len(data))
        return data

    async def save(self, data: dict[str, Any]) -> None:
        """
        Replace the file with a snapshot of ``data``. OS errors are raised as
        PersistenceError with the original error as its cause.
        """
        # Serialize now so the file reflects the store as of this call,
        # even if another mutation lands before the write completes.
        payload = dumps(data)
        async with self._write_lock:
            try:
                await asyncio.to_thread(_write_atomic, self.path, payload)
            except OSError as exc:
                raise PersistenceError(str(self.path), exc) from exc
        logger.debug("store_saved", path=str(self.path), size=len(data))
