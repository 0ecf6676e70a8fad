"""
Record & Milestone Detector

Decides whether a just-logged session beat the lifter's history for that
exercise, and whether streak / workout-count totals landed on a milestone.
Persisting the results (and not awarding the same milestone twice) is the
caller's job; milestone checks take an ``already_awarded`` lookup for that.
"""
import logging
from typing import Callable, Sequence

from app.engine.history import summarize_entry
from app.engine.primitives import estimate_1rm, format_kg, round_to_step
from app.schemas.achievement import MilestoneResult, RecordResult
from app.schemas.enums import AchievementType, RecordKind
from app.schemas.training import ExerciseLogEntry

log = logging.getLogger(__name__)

STREAK_MILESTONES = (7, 14, 30, 60, 90, 180, 365)
WORKOUT_MILESTONES = (10, 25, 50, 100, 250, 500, 1000)

AlreadyAwarded = Callable[[AchievementType, int], bool]


def _title(exercise_name: str | None, label: str) -> str:
    return f"{exercise_name}: {label}" if exercise_name else label


def detect_records(
    history: Sequence[ExerciseLogEntry],
    new_entry: ExerciseLogEntry,
    exercise_name: str | None = None,
) -> list[RecordResult]:
    """
    Compare ``new_entry`` against prior history (which must not contain it).

    The four checks are independent; one session can set several records.
    A first-ever session, or one without a positive weight, sets none.
    """
    if not history:
        return []
    new = summarize_entry(new_entry)
    if new.weight_kg is None or new.weight_kg <= 0:
        return []

    prior = [summarize_entry(e) for e in history]
    weight = new.weight_kg
    results = []

    previous_max = max(p.weight_kg or 0 for p in prior)
    if weight > previous_max:
        results.append(RecordResult(
            kind=RecordKind.weight,
            title=_title(exercise_name, "Weight PR!"),
            description=f"New heaviest weight: {format_kg(weight)}kg (previous: {format_kg(previous_max)}kg)",
            metric_value=weight,
        ))

    if new.reps:
        # only sets at this weight or heavier are comparable for reps
        comparable = [r for p in prior for w, r in p.set_pairs if w >= weight]
        if comparable:
            previous_reps = max(comparable)
            if new.reps > previous_reps:
                results.append(RecordResult(
                    kind=RecordKind.reps,
                    title=_title(exercise_name, "Rep PR!"),
                    description=(
                        f"New most reps at {format_kg(weight)}kg+: "
                        f"{new.reps} reps (previous: {previous_reps})"
                    ),
                    metric_value=new.reps,
                ))

    if new.sets and new.reps and new.volume:
        previous_volume = max(p.volume or 0 for p in prior)
        if new.volume > previous_volume:
            results.append(RecordResult(
                kind=RecordKind.volume,
                title=_title(exercise_name, "Volume PR!"),
                description=(
                    f"New session volume record: {format_kg(new.volume, grouped=True)}kg "
                    f"(previous: {format_kg(previous_volume, grouped=True)}kg)"
                ),
                metric_value=new.volume,
            ))

    if new.reps:
        best = new.best_1rm if new.best_1rm is not None else estimate_1rm(weight, new.reps)
        new_1rm = round_to_step(best, 1)
        previous = [p.best_1rm for p in prior if p.best_1rm is not None]
        if previous:
            previous_1rm = round_to_step(max(previous), 1)
            if new_1rm > previous_1rm:
                results.append(RecordResult(
                    kind=RecordKind.estimated_1rm,
                    title=_title(exercise_name, "Estimated 1RM PR!"),
                    description=f"New estimated 1RM: {format_kg(new_1rm)}kg (previous: {format_kg(previous_1rm)}kg)",
                    metric_value=new_1rm,
                ))

    if results:
        log.info("records set%s: %s", f" on {exercise_name}" if exercise_name else "",
                 ", ".join(r.kind.value for r in results))
    return results


def check_streak_milestone(current_streak: int, already_awarded: AlreadyAwarded) -> MilestoneResult | None:
    """A milestone fires only on an exact threshold that was never awarded."""
    if current_streak not in STREAK_MILESTONES:
        return None
    if already_awarded(AchievementType.streak, current_streak):
        return None
    return MilestoneResult(
        kind=AchievementType.streak,
        title=f"{current_streak}-Day Streak!",
        description=f"You've worked out {current_streak} days in a row. Incredible consistency!",
        metric_value=current_streak,
    )


def check_workout_count_milestone(total_workouts: int, already_awarded: AlreadyAwarded) -> MilestoneResult | None:
    if total_workouts not in WORKOUT_MILESTONES:
        return None
    if already_awarded(AchievementType.milestone, total_workouts):
        return None
    return MilestoneResult(
        kind=AchievementType.milestone,
        title=f"{total_workouts} Workouts!",
        description=f"You've completed {total_workouts} total workouts. Keep pushing!",
        metric_value=total_workouts,
    )
