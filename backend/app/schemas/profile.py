from typing import Annotated
from pydantic import BaseModel, Field, field_validator

from app.schemas.enums import ExperienceLevel, Gender, WeightUnit

class ProfileUpdate(BaseModel):
    gender: Gender | None = None
    experience_level: ExperienceLevel | None = None
    weight_kg: Annotated[float, Field(gt=0, le=400)] | None = None
    weight_unit: WeightUnit = WeightUnit.kg
    preferred_days: list[Annotated[int, Field(ge=1, le=7)]] | None = None

    @field_validator("preferred_days")
    @classmethod
    def days_unique(cls, v: list[int] | None) -> list[int] | None:
        if v is not None and len(set(v)) != len(v):
            raise ValueError("preferred_days must not repeat a day")
        return v

class ProfileRead(BaseModel):
    user_id: int
    gender: Gender | None = None
    experience_level: ExperienceLevel | None = None
    weight_kg: float | None = None
    weight_unit: WeightUnit = WeightUnit.kg
    preferred_days: list[int] | None = None

    model_config = {"from_attributes": True}
