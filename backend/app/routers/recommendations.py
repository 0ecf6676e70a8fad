from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import resolve_client_id
from app.engine import recommend_load
from app.engine.primitives import format_weight
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.log_repo import LogRepository
from app.repositories.profile_repo import ProfileRepository
from app.repositories.program_repo import ProgramRepository
from app.schemas.enums import WeightUnit
from app.schemas.recommendation import RecommendationRead
from app.schemas.training import ExerciseTraits, ClientContext
from app.settings import get_settings

router = APIRouter(tags=["recommendations"])

@router.get("/exercises/{exercise_id}/recommendation", response_model=RecommendationRead)
def get_recommendation(
    exercise_id: int,
    db: Session = Depends(get_db),
    client_id: int = Depends(resolve_client_id),
    program_exercise_id: int | None = Query(None),
    unit: WeightUnit | None = Query(None, description="Defaults to the client's profile unit"),
):
    exercise = ExerciseRepository(db).get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")

    prescription = None
    if program_exercise_id is not None:
        found = ProgramRepository(db).prescription(program_exercise_id)
        if not found or found[0].exercise_id != exercise_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Program exercise not found")
        prescription = found[1]

    profile = ProfileRepository(db).get_for_user(client_id)
    history = LogRepository(db).history(client_id, exercise_id, limit=get_settings().HISTORY_LIMIT)
    rec = recommend_load(
        history,
        ExerciseTraits.model_validate(exercise),
        prescription,
        ClientContext.model_validate(profile) if profile else None,
    )
    display_unit = unit or (profile.weight_unit if profile else WeightUnit.kg)
    return RecommendationRead(
        exercise_id=exercise_id,
        user_id=client_id,
        recommendation=rec,
        display=format_weight(rec.recommended_kg, display_unit),
    )
