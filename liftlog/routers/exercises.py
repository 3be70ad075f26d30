from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.exercise import ExerciseCreate, ExerciseUpdate, ExerciseRead
from liftlog.repositories.exercise_repo import ExerciseRepository

router = APIRouter(prefix="/exercises", tags=["exercises"])

def _duplicate_name() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="exercise name already exists")

@router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db)):
    return ExerciseRepository(db).list()

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    if repo.get_by_name(payload.name):
        raise _duplicate_name()
    try:
        ex = repo.create(**payload.model_dump())
    except ValueError as e:
        if str(e) == "exercise_name_exists":
            raise _duplicate_name()
        raise
    return ex

@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    ex = ExerciseRepository(db).get(exercise_id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return ex

@router.put("/{exercise_id}", response_model=ExerciseRead)
def update_exercise(exercise_id: int, payload: ExerciseUpdate, db: Session = Depends(get_db)):
    try:
        ex = ExerciseRepository(db).update(exercise_id, payload.model_dump(exclude_unset=True))
    except ValueError as e:
        if str(e) == "exercise_name_exists":
            raise _duplicate_name()
        raise
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return ex

# Plan entries and logged sets for this exercise go with it (ON DELETE CASCADE)
@router.delete("/{exercise_id}")
def delete_exercise(exercise_id: int, db: Session = Depends(get_db)):
    if not ExerciseRepository(db).delete(exercise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return {"success": True}
