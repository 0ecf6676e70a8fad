from __future__ import annotations
from datetime import datetime
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models import ExerciseLog, SetLog
from app.repositories.base import BaseRepository, Page
from app.schemas.enums import RecordKind
from app.schemas.exercise_log import LogCreate
from app.schemas.training import ExerciseLogEntry

class LogRepository(BaseRepository[ExerciseLog]):
    model = ExerciseLog

    def _newest_first(self):
        return (
            select(ExerciseLog)
            .options(selectinload(ExerciseLog.set_details))
            .order_by(ExerciseLog.completed_at.desc(), ExerciseLog.id.desc())
        )

    def history(self, user_id: int, exercise_id: int, *, limit: int | None = None) -> list[ExerciseLogEntry]:
        """Engine-ready history for one user+exercise, newest first."""
        stmt = self._newest_first().where(
            ExerciseLog.user_id == user_id, ExerciseLog.exercise_id == exercise_id
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        rows = self.db.execute(stmt).scalars().all()
        return [ExerciseLogEntry.model_validate(row) for row in rows]

    def list_for_user(self, user_id: int, *, exercise_id: int | None = None,
                      limit: int = 50, offset: int = 0) -> Page[ExerciseLog]:
        stmt = self._newest_first().where(ExerciseLog.user_id == user_id)
        if exercise_id is not None:
            stmt = stmt.where(ExerciseLog.exercise_id == exercise_id)
        return self.page_from_stmt(stmt, limit=limit, offset=offset)

    def count_for_user(self, user_id: int) -> int:
        return self.count_where(ExerciseLog.user_id == user_id)

    def workout_times(self, user_id: int) -> list[datetime]:
        stmt = select(ExerciseLog.completed_at).where(ExerciseLog.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, payload: LogCreate, *, completed_at: datetime) -> ExerciseLog:
        data = payload.model_dump(exclude={"set_details"})
        entry = ExerciseLog(user_id=user_id, completed_at=completed_at, is_pr=False, **data)
        for detail in payload.set_details or []:
            entry.set_details.append(SetLog(**detail.model_dump()))
        return self.add_and_refresh(entry)

    def flag_record(self, entry: ExerciseLog, kind: RecordKind) -> None:
        # first record kind found wins the flag
        if not entry.is_pr:
            entry.is_pr = True
            entry.pr_type = kind
            self.db.flush()
