"""Error types raised by data engines."""

from __future__ import annotations


class DataEngineError(Exception):
    """Base exception for every engine failure."""

    def __init__(self, message: str, resource_id: str | None = None) -> None:
        super().__init__(message)
        self.resource_id = resource_id


class KeyFoundError(DataEngineError):
    """Raised when inserting a resource id that is already stored."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Resource '{resource_id}' already exists", resource_id)


class KeyNotFoundError(DataEngineError):
    """Raised when reading or deleting a resource id that is not stored."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Resource '{resource_id}' not found", resource_id)


class InvalidResourceIdError(DataEngineError):
    """Raised when a resource id is not a non-empty string."""

    def __init__(self, resource_id: object) -> None:
        super().__init__(f"Invalid resource id: {resource_id!r}")
        self.resource_id = resource_id


class CorruptStoreError(DataEngineError):
    """Raised when the backing file cannot be parsed into a store."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Backing file {path} is not a valid store: {reason}")
        self.path = path


class UnserializableDataError(DataEngineError):
    """Raised when a value cannot be stored as strict JSON."""

    def __init__(self, resource_id: str, reason: str) -> None:
        super().__init__(f"Resource '{resource_id}' cannot be stored as JSON: {reason}", resource_id)


class PersistenceError(DataEngineError):
    """
    Raised when writing the backing store fails after the in-memory change
    was applied. The original OSError is kept on ``error`` and ``__cause__``.
    """

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"Could not write {path}: {error}")
        self.path = path
        self.error = error
