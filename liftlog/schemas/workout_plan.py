from typing import Annotated
from datetime import datetime
from pydantic import Field, StringConstraints, field_validator
from liftlog.schemas.common import CamelModel, NameStr, NotesStr, reject_null
from liftlog.schemas.exercise import ExerciseRead

PosInt = Annotated[int, Field(ge=1)]
CategoryStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]

class PlanExerciseIn(CamelModel):
    exercise_id: PosInt
    order_index: Annotated[int, Field(ge=0)]
    target_sets: PosInt | None = None
    target_reps: PosInt | None = None
    notes: NotesStr | None = None
    # entries sharing a group are performed back-to-back
    superset_group: PosInt | None = None
    # warm-up / main / accessory / cool-down, display only
    category: CategoryStr | None = None

class WorkoutPlanCreate(CamelModel):
    name: NameStr
    description: NotesStr | None = None
    notes: NotesStr | None = None
    exercises: list[PlanExerciseIn] = []

class WorkoutPlanUpdate(CamelModel):
    name: NameStr | None = None
    description: NotesStr | None = None
    notes: NotesStr | None = None
    # None means "not supplied"; [] clears the plan
    exercises: list[PlanExerciseIn] | None = None

    @field_validator("name", "exercises")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

class PlanExerciseRead(CamelModel):
    id: int
    workout_plan_id: int
    exercise_id: int
    order_index: int
    target_sets: int | None = None
    target_reps: int | None = None
    notes: str | None = None
    superset_group: int | None = None
    category: str | None = None
    created_at: datetime
    exercise: ExerciseRead

class WorkoutPlanSummary(CamelModel):
    id: int
    name: str
    description: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

class WorkoutPlanRead(WorkoutPlanSummary):
    exercises: list[PlanExerciseRead] = []
