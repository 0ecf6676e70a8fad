from __future__ import annotations
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.models import Exercise
from app.repositories.base import BaseRepository, Page
from app.schemas.exercise import ExerciseCreate

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(func.lower(Exercise.name) == name.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self, *, search: str | None = None, limit: int = 50, offset: int = 0) -> Page[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        if search:
            stmt = stmt.where(Exercise.name.ilike(f"%{search}%"))
        return self.page_from_stmt(stmt, limit=limit, offset=offset)

    def create(self, payload: ExerciseCreate) -> Exercise:
        exercise = Exercise(**payload.model_dump())
        try:
            self.db.add(exercise)
            self.db.commit()
            self.db.refresh(exercise)
            return exercise
        except IntegrityError:
            self.db.rollback()
            raise ValueError("exercise_name_taken")
