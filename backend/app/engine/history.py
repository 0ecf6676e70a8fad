"""
One view of a logged session, whether it was captured per set or only as
aggregate sets/reps/weight fields.
"""
from dataclasses import dataclass
from datetime import timezone
from typing import Iterable

from app.engine.primitives import estimate_1rm, parse_reps
from app.schemas.training import ExerciseLogEntry


@dataclass(frozen=True, slots=True)
class SessionSummary:
    weight_kg: float | None       # heaviest working weight
    reps: int | None              # reps performed at that weight
    sets: int | None
    volume: float | None          # total kg moved
    best_1rm: float | None        # unrounded Epley estimate of the best set
    last_weight_kg: float | None  # final set, drives progression
    last_rpe: float | None
    has_set_detail: bool
    set_pairs: tuple[tuple[float, int], ...] = ()  # every (weight, reps) performed


def _sort_key(entry: ExerciseLogEntry):
    ts = entry.completed_at
    # naive timestamps are stored as UTC
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def newest_first(history: Iterable[ExerciseLogEntry]) -> list[ExerciseLogEntry]:
    return sorted(history, key=_sort_key, reverse=True)


def summarize_entry(entry: ExerciseLogEntry) -> SessionSummary:
    details = entry.set_details
    if details:
        weighted = [s for s in details if s.weight_kg is not None]
        top = max((s.weight_kg for s in weighted), default=None)
        top_reps = max((s.reps for s in weighted if s.weight_kg == top), default=None)
        one_rms = [estimate_1rm(s.weight_kg, s.reps) for s in weighted if s.weight_kg > 0 and s.reps > 0]
        last = details[-1]
        return SessionSummary(
            weight_kg=top,
            reps=top_reps,
            sets=len(details),
            volume=sum(s.weight_kg * s.reps for s in weighted) if weighted else None,
            best_1rm=max(one_rms) if one_rms else None,
            last_weight_kg=last.weight_kg,
            last_rpe=last.rpe,
            has_set_detail=True,
            set_pairs=tuple((s.weight_kg, s.reps) for s in weighted),
        )

    weight = entry.weight_kg
    reps = parse_reps(entry.reps_completed)
    sets = entry.sets_completed
    volume = None
    if weight is not None and reps is not None and sets is not None:
        volume = sets * reps * weight
    best = estimate_1rm(weight, reps) if weight and weight > 0 and reps is not None else None
    return SessionSummary(
        weight_kg=weight,
        reps=reps,
        sets=sets,
        volume=volume,
        best_1rm=best,
        last_weight_kg=weight,
        last_rpe=entry.rpe,
        has_set_detail=False,
        set_pairs=((weight, reps),) if weight is not None and reps is not None else (),
    )
