from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Float, JSON, DateTime, Enum as SAEnum, func
from app.db import Base
from app.schemas.enums import ExperienceLevel, Gender, WeightUnit

class ClientProfile(Base):
    __tablename__ = "client_profiles"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True)
    gender: Mapped[Gender | None] = mapped_column(SAEnum(Gender, native_enum=False, length=32), nullable=True)
    experience_level: Mapped[ExperienceLevel | None] = mapped_column(
        SAEnum(ExperienceLevel, native_enum=False, length=32), nullable=True
    )
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight_unit: Mapped[WeightUnit] = mapped_column(
        SAEnum(WeightUnit, native_enum=False, length=8), nullable=False, default=WeightUnit.kg
    )
    preferred_days: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")
