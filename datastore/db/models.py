"""SQLAlchemy models mirroring the JSON store layout."""
from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, String, func

from .session import Base


class Resource(Base):
    __tablename__ = "resources"

    # seq keeps insertion order, matching the JSON file's key order
    seq = Column(Integer, primary_key=True, autoincrement=True)
    resource_id = Column(String(255), unique=True, nullable=False, index=True)
    data = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
