from datetime import datetime
from pydantic import BaseModel

from app.schemas.enums import AchievementType, RecordKind

class RecordResult(BaseModel):
    is_record: bool = True
    kind: RecordKind
    title: str
    description: str
    metric_value: float

class MilestoneResult(BaseModel):
    is_record: bool = True
    kind: AchievementType   # streak or milestone
    title: str
    description: str
    metric_value: int

class AchievementRead(BaseModel):
    id: int
    user_id: int
    achievement_type: AchievementType
    title: str
    description: str
    exercise_id: int | None = None
    metric_value: float | None = None
    celebrated: bool
    earned_at: datetime

    model_config = {"from_attributes": True}
