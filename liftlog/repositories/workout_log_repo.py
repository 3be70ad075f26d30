# liftlog/repositories/workout_log_repo.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.orm import selectinload, joinedload

from liftlog.models import WorkoutLog, WorkoutSet
from liftlog.repositories.base import BaseRepository

log = logging.getLogger(__name__)

def latest_per_set_number(rows: Iterable[Any]) -> dict[int, list[dict[str, Any]]]:
    """
    Fold rows ordered most-recent-first into {exercise_id: [entry, ...]}.

    The first row seen for an (exercise_id, set_number) pair wins and older
    duplicates are dropped. Each exercise's entries come back sorted by set
    number. Rows need exercise_id, set_number, weight and reps attributes;
    a missing weight is reported as 0.
    """
    latest: dict[int, dict[int, dict[str, Any]]] = {}
    for row in rows:
        by_number = latest.setdefault(row.exercise_id, {})
        if row.set_number in by_number:
            continue
        by_number[row.set_number] = {
            "weight": float(row.weight) if row.weight is not None else 0.0,
            "reps": row.reps,
            "set_number": row.set_number,
        }
    return {
        exercise_id: sorted(by_number.values(), key=lambda s: s["set_number"])
        for exercise_id, by_number in latest.items()
    }

class WorkoutLogRepository(BaseRepository[WorkoutLog]):
    model = WorkoutLog

    def _with_sets(self):
        return select(WorkoutLog).options(
            joinedload(WorkoutLog.workout_plan),
            selectinload(WorkoutLog.sets).joinedload(WorkoutSet.exercise),
        )

    # READS
    def list(self) -> list[WorkoutLog]:
        stmt = self._with_sets().order_by(WorkoutLog.performed_at.desc(), WorkoutLog.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_full(self, log_id: int) -> Optional[WorkoutLog]:
        stmt = (
            self._with_sets()
            .where(WorkoutLog.id == log_id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def last_weights(self, exercise_ids: Iterable[int], *, window: int = 10) -> dict[int, list[dict[str, Any]]]:
        """Most recent weight/reps per set number for each exercise, in one query.

        At most `window` of the newest sets per exercise are considered.
        """
        ids = sorted(set(exercise_ids))
        if not ids:
            return {}

        recency = func.row_number().over(
            partition_by=WorkoutSet.exercise_id,
            order_by=[WorkoutLog.performed_at.desc(), WorkoutSet.id.desc()],
        ).label("recency")
        ranked = (
            select(WorkoutSet.exercise_id, WorkoutSet.set_number, WorkoutSet.weight, WorkoutSet.reps, recency)
            .join(WorkoutLog, WorkoutSet.workout_log_id == WorkoutLog.id)
            .where(WorkoutSet.exercise_id.in_(ids))
            .subquery()
        )
        stmt = (
            select(ranked.c.exercise_id, ranked.c.set_number, ranked.c.weight, ranked.c.reps)
            .where(ranked.c.recency <= window)
            .order_by(ranked.c.exercise_id, ranked.c.recency)
        )
        return latest_per_set_number(self.db.execute(stmt).all())

    # WRITES
    def _add_sets(self, log_id: int, sets: list[dict[str, Any]]) -> None:
        self.db.add_all(WorkoutSet(workout_log_id=log_id, **s) for s in sets)

    def create(
        self,
        *,
        workout_plan_id: int | None = None,
        name: str | None = None,
        notes: str | None = None,
        performed_at: datetime | None = None,
        sets: list[dict[str, Any]] | None = None,
    ) -> WorkoutLog:
        wl = WorkoutLog(
            workout_plan_id=workout_plan_id,
            name=name,
            notes=notes,
            performed_at=performed_at or datetime.now(timezone.utc),
        )
        self.db.add(wl)
        self.flush_or_raise("unknown_reference")
        if sets:
            self._add_sets(wl.id, sets)
        self.commit_or_raise("unknown_reference")
        log.info("created workout log id=%s with %d sets", wl.id, len(sets or []))
        return self.get_full(wl.id)

    def update(
        self,
        log_id: int,
        fields: dict[str, Any],
        *,
        sets: list[dict[str, Any]] | None = None,
    ) -> Optional[WorkoutLog]:
        """Partial update; a non-None `sets` replaces all sets in the same transaction."""
        wl = self.get(log_id)
        if not wl:
            return None
        for key, value in fields.items():
            setattr(wl, key, value)

        if sets is not None:
            self.db.execute(delete(WorkoutSet).where(WorkoutSet.workout_log_id == log_id))
            self._add_sets(log_id, sets)
            log.debug("replaced sets of workout log id=%s (%d sets)", log_id, len(sets))

        self.commit_or_raise("unknown_reference")
        return self.get_full(log_id)
