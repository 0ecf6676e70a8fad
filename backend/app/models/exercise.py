from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Boolean, DateTime, Enum as SAEnum, func
from app.db import Base
from app.schemas.enums import MovementPattern

class Exercise(Base):
    __tablename__ = "exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    movement_pattern: Mapped[MovementPattern | None] = mapped_column(
        SAEnum(MovementPattern, native_enum=False, length=32), nullable=True
    )
    muscle_group: Mapped[str | None] = mapped_column(String(120), nullable=True)
    is_compound: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_bodyweight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
