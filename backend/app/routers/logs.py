from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import get_current_user, resolve_client_id
from app.engine.primitives import to_kg
from app.models import User
from app.repositories.log_repo import LogRepository
from app.schemas.achievement import AchievementRead
from app.schemas.enums import WeightUnit
from app.schemas.exercise_log import LogCreate, LogRead, LogResult
from app.services.progress import log_session

router = APIRouter(prefix="/logs", tags=["logs"])

def _in_kg(payload: LogCreate, unit: WeightUnit) -> LogCreate:
    """Entered weights converted to kilograms for storage."""
    def convert(value):
        return None if value is None else to_kg(value, unit)

    details = payload.set_details
    if details:
        details = [d.model_copy(update={"weight_kg": convert(d.weight_kg)}) for d in details]
    return payload.model_copy(update={"weight_kg": convert(payload.weight_kg), "set_details": details})

@router.post("", response_model=LogResult, status_code=status.HTTP_201_CREATED)
def create_log(
    payload: LogCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    unit: WeightUnit = Query(WeightUnit.kg, description="Unit the weights were entered in"),
):
    if unit != WeightUnit.kg:
        payload = _in_kg(payload, unit)
    try:
        result = log_session(db, current, payload)
    except ValueError as e:
        if str(e) == "exercise_not_found":
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
        raise
    return LogResult(
        log=LogRead.model_validate(result.entry),
        achievements=[AchievementRead.model_validate(a) for a in result.achievements],
    )

@router.get("", response_model=list[LogRead])
def list_logs(
    db: Session = Depends(get_db),
    client_id: int = Depends(resolve_client_id),
    exercise_id: int | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = LogRepository(db).list_for_user(client_id, exercise_id=exercise_id, limit=limit, offset=offset)
    return page.items
