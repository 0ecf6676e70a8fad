from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints, field_validator

from app.schemas.enums import Periodization, SplitStyle

DayNumber = Annotated[int, Field(ge=1, le=7)]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class SessionPlanSlot(BaseModel):
    week_number: int
    day_of_week: int
    phase: str
    intensity_modifier: str
    label: str
    focus: str
    slot_id: str

    model_config = {"from_attributes": True, "frozen": True}

class ProgramCreate(BaseModel):
    name: NameStr
    split_style: SplitStyle = SplitStyle.full_body
    periodization: Periodization = Periodization.none
    duration_weeks: Annotated[int, Field(ge=1, le=52)]
    sessions_per_week: Annotated[int, Field(ge=1, le=7)]
    preferred_days: list[DayNumber] | None = None
    # falls back to this client's profile days when preferred_days is omitted
    client_id: int | None = None

    @field_validator("preferred_days")
    @classmethod
    def days_unique(cls, v: list[int] | None) -> list[int] | None:
        if v is not None and len(set(v)) != len(v):
            raise ValueError("preferred_days must not repeat a day")
        return v

class ProgramRead(BaseModel):
    id: int
    name: str
    split_style: SplitStyle
    periodization: Periodization
    duration_weeks: int
    sessions_per_week: int
    created_by: int | None = None
    created_at: datetime
    slot_count: int = 0

    model_config = {"from_attributes": True}

class ProgramExerciseCreate(BaseModel):
    exercise_id: int
    order_index: Annotated[int, Field(ge=0)] = 0
    sets: Annotated[int, Field(ge=1, le=20)] | None = None
    reps: Annotated[str, Field(max_length=50)] | None = None
    intensity_pct: Annotated[float, Field(gt=0, le=100)] | None = None
    rpe_target: Annotated[int, Field(ge=1, le=10)] | None = None

    @field_validator("reps")
    @classmethod
    def reps_non_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return v.strip() or None

class ProgramExerciseRead(BaseModel):
    id: int
    program_id: int
    slot_id: str
    exercise_id: int
    order_index: int
    sets: int | None = None
    reps: str | None = None
    intensity_pct: float | None = None
    rpe_target: int | None = None

    model_config = {"from_attributes": True}
