from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Float, Boolean, DateTime, Text, Enum as SAEnum, UniqueConstraint
from app.db import Base
from app.schemas.enums import RecordKind

class ExerciseLog(Base):
    """One completed working session of one exercise. Rows are never updated
    after the record flags are set at creation time."""
    __tablename__ = "exercise_logs"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id", ondelete="CASCADE"), index=True)
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    sets_completed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps_completed: Mapped[str | None] = mapped_column(String(50), nullable=True)
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_pr: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pr_type: Mapped[RecordKind | None] = mapped_column(SAEnum(RecordKind, native_enum=False, length=32), nullable=True)

    user = relationship("User", back_populates="logs")
    exercise = relationship("Exercise")
    set_details = relationship(
        "SetLog", back_populates="log", cascade="all, delete-orphan", order_by="SetLog.set_number"
    )

class SetLog(Base):
    __tablename__ = "set_logs"
    __table_args__ = (UniqueConstraint("log_id", "set_number", name="uq_set_logs_log_set"),)
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    log_id: Mapped[int] = mapped_column(ForeignKey("exercise_logs.id", ondelete="CASCADE"), index=True)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)

    log = relationship("ExerciseLog", back_populates="set_details")
