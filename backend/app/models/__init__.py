from app.models.user import User
from app.models.client_profile import ClientProfile
from app.models.exercise import Exercise
from app.models.exercise_log import ExerciseLog, SetLog
from app.models.program import Program, ProgramSlot, ProgramExercise
from app.models.achievement import Achievement

__all__ = [
    "User",
    "ClientProfile",
    "Exercise",
    "ExerciseLog",
    "SetLog",
    "Program",
    "ProgramSlot",
    "ProgramExercise",
    "Achievement",
]
