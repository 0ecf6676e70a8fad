from __future__ import annotations
from typing import Optional
from sqlalchemy import select

from app.models import ClientProfile
from app.repositories.base import BaseRepository
from app.schemas.profile import ProfileUpdate

class ProfileRepository(BaseRepository[ClientProfile]):
    model = ClientProfile

    def get_for_user(self, user_id: int) -> Optional[ClientProfile]:
        stmt = select(ClientProfile).where(ClientProfile.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert(self, user_id: int, payload: ProfileUpdate) -> ClientProfile:
        profile = self.get_for_user(user_id) or ClientProfile(user_id=user_id)
        for field, value in payload.model_dump().items():
            setattr(profile, field, value)
        profile = self.add_and_refresh(profile)
        self.db.commit()
        return profile
