# liftlog/repositories/base.py
from __future__ import annotations
import logging
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def delete(self, entity_id: int) -> bool:
        """Delete one row; dependents follow the ON DELETE rules of their foreign keys."""
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        log.info("deleted %s id=%s", self.model.__tablename__, entity_id)
        return True

    def commit_or_raise(self, marker: str) -> None:
        """Commit the unit of work; on a constraint violation roll back and raise ValueError(marker)."""
        self._guarded(self.db.commit, marker)

    def flush_or_raise(self, marker: str) -> None:
        """Flush pending rows (e.g. to get a parent id); same rollback/marker contract as commit_or_raise."""
        self._guarded(self.db.flush, marker)

    def _guarded(self, step, marker: str) -> None:
        try:
            step()
        except IntegrityError as e:
            self.db.rollback()
            log.info("%s rejected: %s", self.model.__tablename__, e.orig)
            # Re-raise a clean marker the router can map to 400
            raise ValueError(marker) from e
