from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import resolve_client_id
from app.repositories.profile_repo import ProfileRepository
from app.schemas.profile import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("", response_model=ProfileRead)
def get_profile(db: Session = Depends(get_db), client_id: int = Depends(resolve_client_id)):
    profile = ProfileRepository(db).get_for_user(client_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile

@router.put("", response_model=ProfileRead)
def put_profile(payload: ProfileUpdate, db: Session = Depends(get_db),
                client_id: int = Depends(resolve_client_id)):
    return ProfileRepository(db).upsert(client_id, payload)
