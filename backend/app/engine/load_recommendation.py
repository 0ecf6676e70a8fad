"""
Load Recommendation Engine

Works out what to put on the bar next session for one exercise, from that
exercise's logged history plus, optionally, a prescribed intensity and the
client's body weight profile.

Decision order:
    1. bodyweight movement      -> reps and form, no load
    2. no history               -> starting weight inferred from the profile
    3. prescribed intensity %   -> percentage of the estimated 1RM
    4. no weight logged         -> start light
    5. no RPE logged            -> repeat the last weight
    6. RPE of the final set     -> add, hold or drop one increment
"""
import logging
from typing import Sequence

from app.engine.history import SessionSummary, newest_first, summarize_entry
from app.engine.primitives import format_kg, round_to_step, weight_from_intensity
from app.schemas.enums import Confidence, ExperienceLevel, Gender, MovementPattern, Trend
from app.schemas.recommendation import WeightRecommendation
from app.schemas.training import (
    ClientContext,
    ExerciseLogEntry,
    ExercisePrescription,
    ExerciseTraits,
)

log = logging.getLogger(__name__)

LOWER_BODY_PATTERNS = {
    MovementPattern.squat,
    MovementPattern.hinge,
    MovementPattern.lunge,
    MovementPattern.carry,
}

# Body weight multipliers aimed at a comfortable first-session load, not a 1RM.
# Calibrated on men; FEMALE_FACTOR scales them down.
BW_MULTIPLIERS: dict[MovementPattern, tuple[float, float]] = {
    #                          compound, isolation
    MovementPattern.squat:    (0.40, 0.20),
    MovementPattern.hinge:    (0.45, 0.20),
    MovementPattern.push:     (0.30, 0.10),
    MovementPattern.pull:     (0.25, 0.10),
    MovementPattern.lunge:    (0.25, 0.15),
    MovementPattern.carry:    (0.30, 0.20),
    MovementPattern.rotation: (0.10, 0.05),
}
NO_LOAD_PATTERNS = {MovementPattern.isometric, MovementPattern.locomotion}

EXPERIENCE_MULTIPLIER = {
    ExperienceLevel.beginner: 1.0,
    ExperienceLevel.intermediate: 1.25,
    ExperienceLevel.advanced: 1.5,
    ExperienceLevel.elite: 1.75,
}
FEMALE_FACTOR = 0.65

TREND_WINDOW = 3

START_LIGHT = "Start light, find your working weight"


def load_increment(traits: ExerciseTraits) -> float:
    """5 kg jumps for lower-body compound lifts, 2.5 kg for everything else."""
    if traits.is_compound and traits.movement_pattern in LOWER_BODY_PATTERNS:
        return 5.0
    return 2.5


def estimate_starting_weight(traits: ExerciseTraits, client: ClientContext | None) -> float | None:
    """Conservative first-session load, or None when no sensible guess exists."""
    if traits.is_bodyweight or client is None:
        return None
    if not client.weight_kg or client.weight_kg <= 0:
        return None

    pattern = traits.movement_pattern or MovementPattern.push
    if pattern in NO_LOAD_PATTERNS:
        return None

    compound, isolation = BW_MULTIPLIERS.get(pattern, BW_MULTIPLIERS[MovementPattern.push])
    multiplier = compound if traits.is_compound else isolation
    gender_factor = FEMALE_FACTOR if client.gender == Gender.female else 1.0
    experience = EXPERIENCE_MULTIPLIER[client.experience_level or ExperienceLevel.beginner]

    estimated = round_to_step(client.weight_kg * multiplier * gender_factor * experience, 2.5)
    return max(5.0 if traits.is_compound else 2.5, estimated)


def compute_trend(history: Sequence[ExerciseLogEntry]) -> Trend:
    """
    Direction of the working weight over the most recent weighted sessions.

    ``history`` is newest first, so "increasing" means each weight is at or
    above the one logged before it and the newest beats the oldest.
    """
    weights = [
        s.weight_kg for s in (summarize_entry(e) for e in newest_first(history))
        if s.weight_kg is not None
    ]
    if len(weights) < 2:
        return Trend.insufficient_data

    recent = weights[:TREND_WINDOW]
    pairs = list(zip(recent, recent[1:]))
    if all(newer >= older for newer, older in pairs) and recent[0] > recent[-1]:
        return Trend.increasing
    if all(newer <= older for newer, older in pairs) and recent[0] < recent[-1]:
        return Trend.decreasing
    return Trend.stable


def _estimated_1rm(summary: SessionSummary) -> float | None:
    if summary.best_1rm is None:
        return None
    if not summary.has_set_detail and not (summary.weight_kg and summary.reps):
        return None
    return round_to_step(summary.best_1rm, 1)


def _recommendation(
    recommended: float | None,
    reasoning: str,
    confidence: Confidence,
    summary: SessionSummary | None = None,
    *,
    estimated_1rm: float | None = None,
    trend: Trend = Trend.insufficient_data,
) -> WeightRecommendation:
    return WeightRecommendation(
        recommended_kg=recommended,
        reasoning=reasoning,
        confidence=confidence,
        estimated_1rm=estimated_1rm,
        last_weight_kg=summary.last_weight_kg if summary else None,
        last_rpe=summary.last_rpe if summary else None,
        trend=trend,
    )


def recommend_load(
    history: Sequence[ExerciseLogEntry],
    exercise: ExerciseTraits,
    prescription: ExercisePrescription | None = None,
    client: ClientContext | None = None,
) -> WeightRecommendation:
    """Recommend next session's load for one exercise. Never raises."""
    if exercise.is_bodyweight:
        return _recommendation(None, "Focus on reps and form", Confidence.high, trend=Trend.stable)

    if not history:
        starting = estimate_starting_weight(exercise, client)
        if starting is not None:
            log.debug("starting weight for %s inferred as %s kg", exercise.name, starting)
            return _recommendation(
                starting,
                "Suggested starting weight based on your profile, adjust to what feels comfortable",
                Confidence.low,
            )
        return _recommendation(None, START_LIGHT, Confidence.none)

    ordered = newest_first(history)
    latest = summarize_entry(ordered[0])
    trend = compute_trend(ordered)
    one_rm = _estimated_1rm(latest)
    last_weight, last_rpe = latest.last_weight_kg, latest.last_rpe

    if prescription and prescription.intensity_pct and one_rm:
        target = weight_from_intensity(one_rm, prescription.intensity_pct)
        return _recommendation(
            target,
            f"Based on estimated 1RM of {format_kg(one_rm)}kg at {format_kg(prescription.intensity_pct)}% intensity",
            Confidence.high, latest, estimated_1rm=one_rm, trend=trend,
        )

    if last_weight is None:
        # last_rpe is still reported so the client sees what they logged
        return WeightRecommendation(
            recommended_kg=None, reasoning=START_LIGHT, confidence=Confidence.none,
            last_rpe=last_rpe, trend=Trend.insufficient_data,
        )

    if last_rpe is None:
        return _recommendation(
            last_weight,
            "Same as last session, log RPE to get better recommendations",
            Confidence.low, latest, estimated_1rm=one_rm, trend=trend,
        )

    step = load_increment(exercise)
    rpe = format_kg(last_rpe)
    if last_rpe <= 7:
        recommended, confidence = last_weight + step, Confidence.high
        reasoning = f"Last session felt easy (RPE {rpe}), increase by {format_kg(step)}kg"
    elif last_rpe < 9:
        recommended, confidence = last_weight, Confidence.high
        reasoning = f"Right on target (RPE {rpe}), maintain weight"
    elif last_rpe < 10:
        recommended, confidence = last_weight, Confidence.medium
        reasoning = f"Hard effort (RPE {rpe}), maintain weight and focus on reps"
    else:
        recommended, confidence = max(0.0, last_weight - step), Confidence.medium
        reasoning = f"Max effort last session (RPE {rpe}), reduce by {format_kg(step)}kg"

    log.debug("%s: rpe=%s last=%s -> %s (%s)", exercise.name, last_rpe, last_weight, recommended, confidence.value)
    return _recommendation(recommended, reasoning, confidence, latest, estimated_1rm=one_rm, trend=trend)
