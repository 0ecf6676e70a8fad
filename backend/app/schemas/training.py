"""
Plain inputs handed to the training engine.

Rows fetched by the repositories are converted with ``model_validate`` so the
engine never touches ORM objects.
"""
from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.schemas.enums import ExperienceLevel, Gender, MovementPattern

# half points allowed (8.5)
Rpe = Annotated[float, Field(ge=1, le=10)]
NonNegFloat = Annotated[float, Field(ge=0, le=1000)]

class SetDetail(BaseModel):
    set_number: Annotated[int, Field(ge=1, le=20)]
    weight_kg: NonNegFloat | None = None
    reps: Annotated[int, Field(ge=0, le=999)]
    rpe: Rpe | None = None

    model_config = {"from_attributes": True, "frozen": True}

class ExerciseLogEntry(BaseModel):
    completed_at: datetime
    sets_completed: int | None = None
    reps_completed: str | None = None   # "8" or a range like "8-12"
    weight_kg: float | None = None
    duration_seconds: int | None = None
    rpe: Rpe | None = None
    notes: str | None = None
    set_details: list[SetDetail] = Field(default_factory=list)

    model_config = {"from_attributes": True, "frozen": True}

    @field_validator("set_details", mode="before")
    @classmethod
    def none_means_no_detail(cls, v):
        return [] if v is None else v

    @field_validator("set_details")
    @classmethod
    def order_by_set_number(cls, v: list[SetDetail]) -> list[SetDetail]:
        return sorted(v, key=lambda s: s.set_number)

class ExerciseTraits(BaseModel):
    name: str = "Exercise"
    movement_pattern: MovementPattern | None = None
    is_compound: bool = False
    is_bodyweight: bool = False

    model_config = {"from_attributes": True}

class ClientContext(BaseModel):
    weight_kg: float | None = None
    gender: Gender | None = None
    experience_level: ExperienceLevel | None = None

    model_config = {"from_attributes": True}

class ExercisePrescription(BaseModel):
    sets: int | None = None
    reps: str | None = None
    intensity_pct: Annotated[float, Field(ge=0, le=100)] | None = None
    rpe_target: Annotated[int, Field(ge=1, le=10)] | None = None

    model_config = {"from_attributes": True}
