from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.settings import get_settings
from liftlog.schemas.workout_log import WorkoutLogCreate, WorkoutLogUpdate, WorkoutLogRead, LastWeight
from liftlog.repositories.workout_log_repo import WorkoutLogRepository

router = APIRouter(prefix="/workouts", tags=["workouts"])

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout log not found")

def _unknown_reference() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="workoutPlanId or exerciseId does not reference an existing record",
    )

def parse_id_list(raw: str | None) -> list[int]:
    """'3, 1,,3' -> [3, 1, 3]; raises ValueError on anything that is not an integer."""
    if not raw:
        return []
    return [int(part) for part in raw.split(",") if part.strip()]

@router.get("", response_model=list[WorkoutLogRead])
def list_workouts(db: Session = Depends(get_db)):
    return WorkoutLogRepository(db).list()

# Declared before /{log_id} so the literal path wins
@router.get("/last-weights", response_model=dict[int, list[LastWeight]])
def last_weights(
    exercise_ids: str | None = Query(None, alias="exerciseIds", description="Comma-separated exercise ids"),
    db: Session = Depends(get_db),
):
    try:
        ids = parse_id_list(exercise_ids)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="exerciseIds must be a comma-separated list of integers",
        )
    return WorkoutLogRepository(db).last_weights(ids, window=get_settings().LAST_WEIGHTS_WINDOW)

@router.post("", response_model=WorkoutLogRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutLogCreate, db: Session = Depends(get_db)):
    try:
        wl = WorkoutLogRepository(db).create(**payload.model_dump())
    except ValueError as e:
        if str(e) == "unknown_reference":
            raise _unknown_reference()
        raise
    return wl

@router.get("/{log_id}", response_model=WorkoutLogRead)
def get_workout(log_id: int, db: Session = Depends(get_db)):
    wl = WorkoutLogRepository(db).get_full(log_id)
    if not wl:
        raise _not_found()
    return wl

@router.put("/{log_id}", response_model=WorkoutLogRead)
def update_workout(log_id: int, payload: WorkoutLogUpdate, db: Session = Depends(get_db)):
    fields = payload.model_dump(exclude_unset=True)
    sets = fields.pop("sets", None)
    try:
        wl = WorkoutLogRepository(db).update(log_id, fields, sets=sets)
    except ValueError as e:
        if str(e) == "unknown_reference":
            raise _unknown_reference()
        raise
    if not wl:
        raise _not_found()
    return wl

@router.delete("/{log_id}")
def delete_workout(log_id: int, db: Session = Depends(get_db)):
    if not WorkoutLogRepository(db).delete(log_id):
        raise _not_found()
    return {"success": True}
