# liftlog/repositories/exercise_repo.py
from __future__ import annotations
from typing import Any, Optional

from sqlalchemy import select, func

from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    # READS
    def list(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(Exercise.name == name)
        return self.db.execute(stmt).scalars().first()

    # WRITES
    def create(self, *, name: str, instructions: str, gif_url: str | None = None, uses_weight: bool = True) -> Exercise:
        ex = Exercise(name=name, instructions=instructions, gif_url=gif_url, uses_weight=uses_weight)
        self.db.add(ex)
        self.commit_or_raise("exercise_name_exists")
        self.db.refresh(ex)
        return ex

    def update(self, exercise_id: int, fields: dict[str, Any]) -> Optional[Exercise]:
        """Apply only the supplied fields; returns None when the exercise does not exist."""
        ex = self.get(exercise_id)
        if not ex:
            return None
        for key, value in fields.items():
            setattr(ex, key, value)
        # onupdate only fires when a column changed; bump explicitly so every update counts
        ex.updated_at = func.now()
        self.commit_or_raise("exercise_name_exists")
        self.db.refresh(ex)
        return ex
