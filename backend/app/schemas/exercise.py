from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, StringConstraints

from app.schemas.enums import MovementPattern

ExerciseName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class ExerciseCreate(BaseModel):
    name: ExerciseName
    movement_pattern: MovementPattern | None = None
    muscle_group: Annotated[str, StringConstraints(strip_whitespace=True, max_length=120)] | None = None
    is_compound: bool = False
    is_bodyweight: bool = False

class ExerciseRead(BaseModel):
    id: int
    name: str
    movement_pattern: MovementPattern | None = None
    muscle_group: str | None = None
    is_compound: bool
    is_bodyweight: bool
    created_at: datetime

    model_config = {"from_attributes": True}
