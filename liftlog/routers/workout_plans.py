from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.workout_plan import WorkoutPlanCreate, WorkoutPlanUpdate, WorkoutPlanRead
from liftlog.repositories.workout_plan_repo import WorkoutPlanRepository

router = APIRouter(prefix="/workout-plans", tags=["workout-plans"])

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout plan not found")

def _unknown_exercise() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="exerciseId does not reference an existing exercise")

@router.get("", response_model=list[WorkoutPlanRead])
def list_plans(db: Session = Depends(get_db)):
    return WorkoutPlanRepository(db).list()

@router.post("", response_model=WorkoutPlanRead, status_code=status.HTTP_201_CREATED)
def create_plan(payload: WorkoutPlanCreate, db: Session = Depends(get_db)):
    data = payload.model_dump()
    try:
        plan = WorkoutPlanRepository(db).create(**data)
    except ValueError as e:
        if str(e) == "unknown_exercise":
            raise _unknown_exercise()
        raise
    return plan

@router.get("/{plan_id}", response_model=WorkoutPlanRead)
def get_plan(plan_id: int, db: Session = Depends(get_db)):
    plan = WorkoutPlanRepository(db).get_full(plan_id)
    if not plan:
        raise _not_found()
    return plan

@router.put("/{plan_id}", response_model=WorkoutPlanRead)
def update_plan(plan_id: int, payload: WorkoutPlanUpdate, db: Session = Depends(get_db)):
    fields = payload.model_dump(exclude_unset=True)
    # present (even []) -> replace the whole list; absent -> keep it
    exercises = fields.pop("exercises", None)
    try:
        plan = WorkoutPlanRepository(db).update(plan_id, fields, exercises=exercises)
    except ValueError as e:
        if str(e) == "unknown_exercise":
            raise _unknown_exercise()
        raise
    if not plan:
        raise _not_found()
    return plan

# Logs based on this plan survive with workoutPlanId cleared (ON DELETE SET NULL)
@router.delete("/{plan_id}")
def delete_plan(plan_id: int, db: Session = Depends(get_db)):
    if not WorkoutPlanRepository(db).delete(plan_id):
        raise _not_found()
    return {"success": True}
