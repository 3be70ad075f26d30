from typing import Annotated
from datetime import datetime
from pydantic import Field, field_validator
from liftlog.schemas.common import CamelModel, NameStr, NotesStr, reject_null
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout_plan import WorkoutPlanSummary

PosInt = Annotated[int, Field(ge=1)]
RepCount = Annotated[int, Field(ge=0)]
Weight = Annotated[float, Field(ge=0, le=10000)]

class WorkoutSetIn(CamelModel):
    exercise_id: PosInt
    set_number: PosInt
    reps: RepCount
    weight: Weight | None = None  # omitted for bodyweight work
    notes: NotesStr | None = None
    completed: bool | None = None

class WorkoutLogCreate(CamelModel):
    workout_plan_id: PosInt | None = None
    name: NameStr | None = None
    notes: NotesStr | None = None
    performed_at: datetime | None = None
    sets: list[WorkoutSetIn] = []

class WorkoutLogUpdate(CamelModel):
    # explicit null on workoutPlanId detaches the log from its plan
    workout_plan_id: PosInt | None = None
    name: NameStr | None = None
    notes: NotesStr | None = None
    performed_at: datetime | None = None
    sets: list[WorkoutSetIn] | None = None

    @field_validator("performed_at", "sets")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

class WorkoutSetRead(CamelModel):
    id: int
    workout_log_id: int
    exercise_id: int
    set_number: int
    weight: float | None = None
    reps: int
    notes: str | None = None
    completed: bool | None = None
    created_at: datetime
    exercise: ExerciseRead

class WorkoutLogRead(CamelModel):
    id: int
    workout_plan_id: int | None = None
    name: str | None = None
    notes: str | None = None
    performed_at: datetime
    created_at: datetime
    workout_plan: WorkoutPlanSummary | None = None
    sets: list[WorkoutSetRead] = []

class LastWeight(CamelModel):
    weight: float
    reps: int
    set_number: int
