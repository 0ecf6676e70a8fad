"""
Log a working session and hand out whatever it earned.

Order matters: prior history is read before the new row is written, so
``detect_records`` compares against what the lifter had done *before* this
session. The user row is locked for the whole sequence so two concurrent
logs cannot both be credited with the same record.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import partial

from sqlalchemy.orm import Session

from app.engine import (
    check_streak_milestone,
    check_workout_count_milestone,
    compute_current_streak,
    detect_records,
)
from app.models import Achievement, ExerciseLog, User
from app.repositories.achievement_repo import AchievementRepository
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.log_repo import LogRepository
from app.repositories.user_repo import UserRepository
from app.schemas.enums import AchievementType
from app.schemas.exercise_log import LogCreate
from app.schemas.training import ExerciseLogEntry

log = logging.getLogger(__name__)

@dataclass(slots=True)
class LoggedSession:
    entry: ExerciseLog
    achievements: list[Achievement] = field(default_factory=list)

def _as_utc(ts: datetime) -> datetime:
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts.astimezone(timezone.utc)

def log_session(db: Session, user: User, payload: LogCreate, *, now: datetime | None = None) -> LoggedSession:
    exercise = ExerciseRepository(db).get(payload.exercise_id)
    if not exercise:
        raise ValueError("exercise_not_found")

    UserRepository(db).lock(user.id)
    logs = LogRepository(db)
    awards = AchievementRepository(db)
    completed_at = _as_utc(now or datetime.now(timezone.utc))

    prior = logs.history(user.id, exercise.id)
    entry = logs.create(user.id, payload, completed_at=completed_at)
    result = LoggedSession(entry=entry)

    for record in detect_records(prior, ExerciseLogEntry.model_validate(entry), exercise.name):
        result.achievements.append(awards.create(
            user.id,
            achievement_type=AchievementType.pr,
            title=record.title,
            description=record.description,
            metric_value=record.metric_value,
            exercise_id=exercise.id,
        ))
        logs.flag_record(entry, record.kind)

    already_awarded = partial(awards.has_award, user.id)
    streak = compute_current_streak(
        (_as_utc(ts) for ts in logs.workout_times(user.id)), completed_at.date()
    )
    milestones = (
        check_streak_milestone(streak, already_awarded),
        check_workout_count_milestone(logs.count_for_user(user.id), already_awarded),
    )
    for milestone in milestones:
        if milestone is None:
            continue
        result.achievements.append(awards.create(
            user.id,
            achievement_type=milestone.kind,
            title=milestone.title,
            description=milestone.description,
            metric_value=milestone.metric_value,
        ))

    db.commit()
    db.refresh(entry)
    if result.achievements:
        log.info("user=%s exercise=%s earned %d achievement(s)", user.id, exercise.id, len(result.achievements))
    return result
