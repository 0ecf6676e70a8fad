from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Float, DateTime, Enum as SAEnum, UniqueConstraint, func
from app.db import Base
from app.schemas.enums import Periodization, SplitStyle

class Program(Base):
    __tablename__ = "programs"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    split_style: Mapped[SplitStyle] = mapped_column(SAEnum(SplitStyle, native_enum=False, length=32), nullable=False)
    periodization: Mapped[Periodization] = mapped_column(
        SAEnum(Periodization, native_enum=False, length=32), nullable=False
    )
    duration_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    sessions_per_week: Mapped[int] = mapped_column(Integer, nullable=False)
    created_by: Mapped[int | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    slots = relationship(
        "ProgramSlot", back_populates="program", cascade="all, delete-orphan",
        order_by="ProgramSlot.id",
    )

    @property
    def slot_count(self) -> int:
        return len(self.slots)

class ProgramSlot(Base):
    __tablename__ = "program_slots"
    __table_args__ = (UniqueConstraint("program_id", "slot_id", name="uq_program_slots_program_slot"),)
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    program_id: Mapped[int] = mapped_column(ForeignKey("programs.id", ondelete="CASCADE"), index=True)
    slot_id: Mapped[str] = mapped_column(String(16), nullable=False)
    week_number: Mapped[int] = mapped_column(Integer, nullable=False)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    phase: Mapped[str] = mapped_column(String(40), nullable=False)
    intensity_modifier: Mapped[str] = mapped_column(String(40), nullable=False)
    label: Mapped[str] = mapped_column(String(80), nullable=False)
    focus: Mapped[str] = mapped_column(String(255), nullable=False)

    program = relationship("Program", back_populates="slots")

class ProgramExercise(Base):
    """Prescription for one exercise inside a plan slot."""
    __tablename__ = "program_exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    program_id: Mapped[int] = mapped_column(ForeignKey("programs.id", ondelete="CASCADE"), index=True)
    slot_id: Mapped[str] = mapped_column(String(16), nullable=False)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id", ondelete="CASCADE"), index=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[str | None] = mapped_column(String(50), nullable=True)
    intensity_pct: Mapped[float | None] = mapped_column(Float, nullable=True)
    rpe_target: Mapped[int | None] = mapped_column(Integer, nullable=True)
