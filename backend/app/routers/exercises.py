from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import get_current_user, require_staff
from app.repositories.exercise_repo import ExerciseRepository
from app.schemas.exercise import ExerciseCreate, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead], dependencies=[Depends(get_current_user)])
def list_exercises(
    db: Session = Depends(get_db),
    search: str | None = Query(None, max_length=120),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return ExerciseRepository(db).list(search=search, limit=limit, offset=offset).items

@router.get("/{exercise_id}", response_model=ExerciseRead, dependencies=[Depends(get_current_user)])
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    exercise = ExerciseRepository(db).get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return exercise

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_staff)])
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    if repo.get_by_name(payload.name):
        raise HTTPException(status_code=400, detail="exercise already exists")
    try:
        return repo.create(payload)
    except ValueError as e:
        if str(e) == "exercise_name_taken":
            raise HTTPException(status_code=400, detail="exercise already exists")
        raise
