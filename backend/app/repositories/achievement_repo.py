from __future__ import annotations
from typing import Optional
from sqlalchemy import select

from app.models import Achievement
from app.repositories.base import BaseRepository
from app.schemas.enums import AchievementType

class AchievementRepository(BaseRepository[Achievement]):
    model = Achievement

    def has_award(self, user_id: int, achievement_type: AchievementType, value: float) -> bool:
        return self.count_where(
            Achievement.user_id == user_id,
            Achievement.achievement_type == achievement_type,
            Achievement.metric_value == value,
        ) > 0

    def list_for_user(self, user_id: int, *, uncelebrated: bool = False) -> list[Achievement]:
        stmt = select(Achievement).where(Achievement.user_id == user_id)
        if uncelebrated:
            stmt = stmt.where(Achievement.celebrated.is_(False))
        stmt = stmt.order_by(Achievement.earned_at.desc(), Achievement.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, *, achievement_type: AchievementType, title: str, description: str,
               metric_value: float | None, exercise_id: int | None = None) -> Achievement:
        return self.add_and_refresh(Achievement(
            user_id=user_id,
            achievement_type=achievement_type,
            title=title,
            description=description,
            exercise_id=exercise_id,
            metric_value=metric_value,
            celebrated=False,
        ))

    def mark_celebrated(self, achievement_id: int) -> Optional[Achievement]:
        achievement = self.get(achievement_id)
        if not achievement:
            return None
        achievement.celebrated = True
        self.db.commit()
        self.db.refresh(achievement)
        return achievement
