"""High-level resource access helpers backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from datastore.core.errors import KeyFoundError
from datastore.db.models import Resource
from datastore.db.session import Base, create_db_engine, create_sessionmaker

logger = structlog.get_logger(__name__)


class ResourceRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def __init__(self, url: str) -> None:
        self.engine = create_db_engine(url)
        self._sessionmaker = create_sessionmaker(self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.debug("schema_ready", url=self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def get(self, resource_id: str) -> Optional[Resource]:
        with self.session() as session:
            stmt = select(Resource).where(Resource.resource_id == resource_id)
            return session.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[tuple[str, Any]]:
        with self.session() as session:
            rows = session.execute(select(Resource.resource_id, Resource.data).order_by(Resource.seq)).all()
            return [(row.resource_id, row.data) for row in rows]

    def exists(self, resource_id: str) -> bool:
        with self.session() as session:
            stmt = select(Resource.seq).where(Resource.resource_id == resource_id)
            return session.execute(stmt).first() is not None

    def count(self) -> int:
        with self.session() as session:
            return session.execute(select(func.count()).select_from(Resource)).scalar_one()

    def create(self, resource_id: str, data: Any) -> None:
        with self.session() as session:
            session.add(Resource(resource_id=resource_id, data=data))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise KeyFoundError(resource_id) from exc

    def delete(self, resource_id: str) -> bool:
        """Remove a resource; returns False when nothing matched."""
        with self.session() as session:
            result = session.execute(delete(Resource).where(Resource.resource_id == resource_id))
            session.commit()
            return result.rowcount > 0

    def dispose(self) -> None:
        self.engine.dispose()
