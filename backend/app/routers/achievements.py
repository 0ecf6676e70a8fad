from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import get_current_user, resolve_client_id
from app.models import User
from app.repositories.achievement_repo import AchievementRepository
from app.schemas.achievement import AchievementRead

router = APIRouter(prefix="/achievements", tags=["achievements"])

@router.get("", response_model=list[AchievementRead])
def list_achievements(
    db: Session = Depends(get_db),
    client_id: int = Depends(resolve_client_id),
    uncelebrated: bool = Query(False, description="Only achievements not yet shown to the client"),
):
    return AchievementRepository(db).list_for_user(client_id, uncelebrated=uncelebrated)

@router.post("/{achievement_id}/celebrate", response_model=AchievementRead)
def celebrate(achievement_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    repo = AchievementRepository(db)
    achievement = repo.get(achievement_id)
    # someone else's achievement is reported as missing
    if not achievement or achievement.user_id != current.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return repo.mark_celebrated(achievement_id)
