"""Database helpers (engine/session export)."""

from .session import Base, create_db_engine, create_sessionmaker

__all__ = ["Base", "create_db_engine", "create_sessionmaker"]
