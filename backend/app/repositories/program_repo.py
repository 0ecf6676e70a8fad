from __future__ import annotations
from typing import Optional
from sqlalchemy import select

from app.models import Program, ProgramSlot, ProgramExercise
from app.repositories.base import BaseRepository
from app.schemas.plan import ProgramCreate, ProgramExerciseCreate, SessionPlanSlot
from app.schemas.training import ExercisePrescription

class ProgramRepository(BaseRepository[Program]):
    model = Program

    def create_with_slots(self, payload: ProgramCreate, slots: list[SessionPlanSlot], *,
                          created_by: int | None) -> Program:
        program = Program(
            name=payload.name,
            split_style=payload.split_style,
            periodization=payload.periodization,
            duration_weeks=payload.duration_weeks,
            sessions_per_week=payload.sessions_per_week,
            created_by=created_by,
        )
        program.slots = [ProgramSlot(**slot.model_dump()) for slot in slots]
        program = self.add_and_refresh(program)
        self.db.commit()
        return program

    def get_slot(self, program_id: int, slot_id: str) -> Optional[ProgramSlot]:
        stmt = select(ProgramSlot).where(ProgramSlot.program_id == program_id, ProgramSlot.slot_id == slot_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def add_exercise(self, program_id: int, slot_id: str, payload: ProgramExerciseCreate) -> ProgramExercise:
        item = ProgramExercise(program_id=program_id, slot_id=slot_id, **payload.model_dump())
        item = self.add_and_refresh(item)
        self.db.commit()
        return item

    def list_exercises(self, program_id: int, slot_id: str) -> list[ProgramExercise]:
        stmt = (
            select(ProgramExercise)
            .where(ProgramExercise.program_id == program_id, ProgramExercise.slot_id == slot_id)
            .order_by(ProgramExercise.order_index.asc(), ProgramExercise.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def prescription(self, program_exercise_id: int) -> tuple[ProgramExercise, ExercisePrescription] | None:
        item = self.db.get(ProgramExercise, program_exercise_id)
        if not item:
            return None
        return item, ExercisePrescription.model_validate(item)
