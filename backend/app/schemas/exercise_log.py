from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints

from app.schemas.achievement import AchievementRead
from app.schemas.enums import RecordKind
from app.schemas.training import NonNegFloat, Rpe, SetDetail

RepsStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class LogCreate(BaseModel):
    exercise_id: int
    sets_completed: Annotated[int, Field(ge=1, le=20)]
    reps_completed: RepsStr
    weight_kg: NonNegFloat | None = None
    rpe: Rpe | None = None
    duration_seconds: Annotated[int, Field(ge=0)] | None = None
    notes: NotesStr | None = None
    set_details: Annotated[list[SetDetail], Field(min_length=1, max_length=20)] | None = None

class LogRead(BaseModel):
    id: int
    user_id: int
    exercise_id: int
    completed_at: datetime
    sets_completed: int | None = None
    reps_completed: str | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    rpe: float | None = None
    notes: str | None = None
    is_pr: bool
    pr_type: RecordKind | None = None
    set_details: list[SetDetail] = Field(default_factory=list)

    model_config = {"from_attributes": True}

class LogResult(BaseModel):
    log: LogRead
    achievements: list[AchievementRead]
