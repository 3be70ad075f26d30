# liftlog/repositories/workout_plan_repo.py
from __future__ import annotations
import logging
from typing import Any, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.orm import selectinload

from liftlog.models import WorkoutPlan, PlanExercise
from liftlog.repositories.base import BaseRepository

log = logging.getLogger(__name__)

class WorkoutPlanRepository(BaseRepository[WorkoutPlan]):
    model = WorkoutPlan

    def _with_exercises(self):
        return select(WorkoutPlan).options(
            selectinload(WorkoutPlan.exercises).joinedload(PlanExercise.exercise)
        )

    # READS
    def list(self) -> list[WorkoutPlan]:
        stmt = self._with_exercises().order_by(WorkoutPlan.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_full(self, plan_id: int) -> Optional[WorkoutPlan]:
        stmt = (
            self._with_exercises()
            .where(WorkoutPlan.id == plan_id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def _add_entries(self, plan_id: int, entries: list[dict[str, Any]]) -> None:
        self.db.add_all(PlanExercise(workout_plan_id=plan_id, **e) for e in entries)

    def create(
        self,
        *,
        name: str,
        description: str | None = None,
        notes: str | None = None,
        exercises: list[dict[str, Any]] | None = None,
    ) -> WorkoutPlan:
        plan = WorkoutPlan(name=name, description=description, notes=notes)
        self.db.add(plan)
        self.flush_or_raise("unknown_exercise")  # need plan.id for the entries
        if exercises:
            self._add_entries(plan.id, exercises)
        self.commit_or_raise("unknown_exercise")
        log.info("created workout plan id=%s with %d exercises", plan.id, len(exercises or []))
        return self.get_full(plan.id)

    def update(
        self,
        plan_id: int,
        fields: dict[str, Any],
        *,
        exercises: list[dict[str, Any]] | None = None,
    ) -> Optional[WorkoutPlan]:
        """Partial update. A non-None `exercises` replaces every entry of the plan.

        The delete and the re-insert share one transaction, so readers never
        see the plan with its entries half replaced.
        """
        plan = self.get(plan_id)
        if not plan:
            return None
        for key, value in fields.items():
            setattr(plan, key, value)
        plan.updated_at = func.now()

        if exercises is not None:
            self.db.execute(delete(PlanExercise).where(PlanExercise.workout_plan_id == plan_id))
            self._add_entries(plan_id, exercises)
            log.debug("replaced exercises of plan id=%s (%d entries)", plan_id, len(exercises))

        self.commit_or_raise("unknown_exercise")
        return self.get_full(plan_id)
