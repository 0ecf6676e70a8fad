from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import get_current_user, require_staff
from app.engine import build_plan
from app.models import User
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.program_repo import ProgramRepository
from app.repositories.profile_repo import ProfileRepository
from app.repositories.user_repo import UserRepository
from app.schemas.plan import (
    ProgramCreate,
    ProgramExerciseCreate,
    ProgramExerciseRead,
    ProgramRead,
    SessionPlanSlot,
)

router = APIRouter(prefix="/programs", tags=["programs"])

def _get_program_or_404(repo: ProgramRepository, program_id: int):
    program = repo.get(program_id)
    if not program:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Program not found")
    return program

@router.post("", response_model=ProgramRead, status_code=status.HTTP_201_CREATED)
def create_program(payload: ProgramCreate, db: Session = Depends(get_db), coach: User = Depends(require_staff)):
    preferred_days = payload.preferred_days
    if payload.client_id is not None:
        if not UserRepository(db).get(payload.client_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
        profile = ProfileRepository(db).get_for_user(payload.client_id)
        if preferred_days is None and profile:
            preferred_days = profile.preferred_days
    slots = build_plan(
        payload.split_style,
        payload.periodization,
        payload.duration_weeks,
        payload.sessions_per_week,
        preferred_days,
    )
    return ProgramRepository(db).create_with_slots(payload, slots, created_by=coach.id)

@router.get("/{program_id}", response_model=ProgramRead, dependencies=[Depends(get_current_user)])
def get_program(program_id: int, db: Session = Depends(get_db)):
    return _get_program_or_404(ProgramRepository(db), program_id)

@router.get("/{program_id}/slots", response_model=list[SessionPlanSlot], dependencies=[Depends(get_current_user)])
def list_slots(program_id: int, db: Session = Depends(get_db)):
    return _get_program_or_404(ProgramRepository(db), program_id).slots

@router.get("/{program_id}/slots/{slot_id}/exercises", response_model=list[ProgramExerciseRead],
            dependencies=[Depends(get_current_user)])
def list_slot_exercises(program_id: int, slot_id: str, db: Session = Depends(get_db)):
    repo = ProgramRepository(db)
    if not repo.get_slot(program_id, slot_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    return repo.list_exercises(program_id, slot_id)

@router.post("/{program_id}/slots/{slot_id}/exercises", response_model=ProgramExerciseRead,
             status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_staff)])
def add_slot_exercise(program_id: int, slot_id: str, payload: ProgramExerciseCreate,
                      db: Session = Depends(get_db)):
    repo = ProgramRepository(db)
    if not repo.get_slot(program_id, slot_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    if not ExerciseRepository(db).get(payload.exercise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return repo.add_exercise(program_id, slot_id, payload)
