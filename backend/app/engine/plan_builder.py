"""
Plan Builder

Turns a split style and a periodization style into the week-by-week,
day-by-day session skeleton of a program. Exercise selection for each slot
happens elsewhere; slots are keyed by ``w{week}d{day}`` so that step can be
re-run without duplicating work.
"""
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from app.schemas.enums import Periodization, SplitStyle
from app.schemas.plan import SessionPlanSlot


@dataclass(frozen=True, slots=True)
class DayTemplate:
    label: str
    focus: str


@dataclass(frozen=True, slots=True)
class WeekPhase:
    week_number: int
    phase: str
    intensity_modifier: str


def _days(*pairs: tuple[str, str]) -> tuple[DayTemplate, ...]:
    return tuple(DayTemplate(label, focus) for label, focus in pairs)


# Each split lists (largest sessions_per_week served, templates) tiers.
# The first tier covering the requested count wins, then it is cut to length.
SPLIT_TEMPLATES: dict[SplitStyle, tuple[tuple[int, tuple[DayTemplate, ...]], ...]] = {
    SplitStyle.full_body: (
        (4, _days(
            ("Full Body A", "push emphasis (chest, shoulders, triceps) with lower body compounds"),
            ("Full Body B", "pull emphasis (back, biceps) with lower body compounds"),
            ("Full Body C", "lower body emphasis (quads, hamstrings, glutes) with upper accessories"),
            ("Full Body D", "balanced full body with core and stability work"),
        )),
    ),
    SplitStyle.upper_lower: (
        (2, _days(
            ("Upper Body", "chest, back, shoulders, arms"),
            ("Lower Body", "quads, hamstrings, glutes, calves"),
        )),
        (3, _days(
            ("Upper Body A", "chest, shoulders, triceps emphasis"),
            ("Lower Body", "quads, hamstrings, glutes, calves"),
            ("Upper Body B", "back, biceps, rear delts emphasis"),
        )),
        (6, _days(
            ("Upper Body A", "chest, shoulders, triceps emphasis"),
            ("Lower Body A", "quad-dominant (squats, leg press, lunges)"),
            ("Upper Body B", "back, biceps, rear delts emphasis"),
            ("Lower Body B", "hip-dominant (deadlifts, hip thrusts, hamstrings)"),
            ("Upper Body C", "balanced push/pull with arm isolation"),
            ("Lower Body C", "unilateral focus and posterior chain"),
        )),
    ),
    SplitStyle.push_pull_legs: (
        (3, _days(
            ("Push", "chest, shoulders, triceps"),
            ("Pull", "back, biceps, rear delts"),
            ("Legs", "quads, hamstrings, glutes, calves"),
        )),
        (4, _days(
            ("Push", "chest, shoulders, triceps"),
            ("Pull", "back, biceps, rear delts"),
            ("Legs", "quads, hamstrings, glutes, calves"),
            ("Upper Power", "heavy compound push and pull"),
        )),
        (6, _days(
            ("Push A", "chest emphasis, shoulders, triceps"),
            ("Pull A", "back width (lats), biceps"),
            ("Legs A", "quad-dominant, calves"),
            ("Push B", "shoulder emphasis, chest, triceps"),
            ("Pull B", "back thickness (traps, rhomboids), biceps"),
            ("Legs B", "hip-dominant, hamstrings, glutes"),
        )),
    ),
    SplitStyle.push_pull: (
        (2, _days(
            ("Push + Quads", "chest, shoulders, triceps, quads"),
            ("Pull + Hams", "back, biceps, hamstrings, glutes"),
        )),
        (4, _days(
            ("Push A + Quads", "chest emphasis, shoulders, triceps, quads"),
            ("Pull A + Hams", "back emphasis, biceps, hamstrings, glutes"),
            ("Push B + Shoulders", "shoulder emphasis, chest, triceps, quads"),
            ("Pull B + Posterior", "back thickness, biceps, glutes, hamstrings"),
        )),
    ),
    SplitStyle.body_part: (
        (3, _days(
            ("Chest & Triceps", "chest, triceps"),
            ("Back & Biceps", "back, biceps, rear delts"),
            ("Legs & Shoulders", "quads, hamstrings, glutes, shoulders"),
        )),
        (4, _days(
            ("Chest", "chest, front delts"),
            ("Back", "back, rear delts"),
            ("Shoulders & Arms", "shoulders, biceps, triceps"),
            ("Legs", "quads, hamstrings, glutes, calves"),
        )),
        (5, _days(
            ("Chest", "chest, front delts"),
            ("Back", "lats, traps, rhomboids"),
            ("Shoulders", "all delt heads, traps"),
            ("Arms", "biceps, triceps, forearms"),
            ("Legs", "quads, hamstrings, glutes, calves"),
        )),
        (6, _days(
            ("Chest", "chest, front delts"),
            ("Back", "lats, traps, rhomboids"),
            ("Shoulders", "all delt heads, traps"),
            ("Arms", "biceps, triceps, forearms"),
            ("Quads & Calves", "quadriceps, calves"),
            ("Hamstrings & Glutes", "hamstrings, glutes, posterior chain"),
        )),
    ),
    SplitStyle.movement_pattern: (
        (6, _days(
            ("Push Day", "horizontal and vertical push patterns"),
            ("Pull Day", "horizontal and vertical pull patterns"),
            ("Squat & Lunge", "knee-dominant patterns (squats, lunges)"),
            ("Hinge & Carry", "hip-dominant patterns (deadlifts, carries)"),
            ("Power & Rotation", "explosive and rotational patterns"),
            ("Mixed Patterns", "balanced combination of all patterns"),
        )),
    ),
}

DEFAULT_DAY_SPREADS: dict[int, tuple[int, ...]] = {
    1: (1,),                    # Mon
    2: (1, 4),                  # Mon, Thu
    3: (1, 3, 5),               # Mon, Wed, Fri
    4: (1, 2, 4, 5),            # Mon, Tue, Thu, Fri
    5: (1, 2, 3, 5, 6),         # Mon, Tue, Wed, Fri, Sat
    6: (1, 2, 3, 4, 5, 6),      # Mon-Sat
    7: (1, 2, 3, 4, 5, 6, 7),
}

DELOAD_MIN_WEEKS = 6
DELOAD = ("Deload", "low")

# (upper bound of program progress, phase, intensity modifier)
LINEAR_PHASES = (
    (Fraction(2, 5), "Accumulation", "moderate"),
    (Fraction(3, 4), "Intensification", "high"),
    (Fraction(1), "Peak", "very high"),
)
REVERSE_LINEAR_PHASES = (
    (Fraction(2, 5), "Strength", "high"),
    (Fraction(3, 4), "Hypertrophy", "moderate"),
    (Fraction(1), "Endurance", "moderate-low"),
)
UNDULATING_MODIFIERS = ("moderate", "high", "moderate-high")
BLOCK_PHASES = (
    ("Hypertrophy", "moderate"),
    ("Strength", "high"),
    ("Power / Peaking", "very high"),
)


def _coerce(enum_cls, value, default):
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        return default


def get_day_templates(split_style, sessions_per_week: int) -> list[DayTemplate]:
    style = _coerce(SplitStyle, split_style, SplitStyle.full_body)
    # custom splits are authored by hand later; seed them as full body
    tiers = SPLIT_TEMPLATES.get(style, SPLIT_TEMPLATES[SplitStyle.full_body])
    templates = tiers[-1][1]
    for max_sessions, tier in tiers:
        if sessions_per_week <= max_sessions:
            templates = tier
            break
    return list(templates[:sessions_per_week])


def _by_progress(week: int, weeks: int, phases) -> tuple[str, str]:
    progress = Fraction(week, weeks)
    for upper, phase, modifier in phases:
        if progress <= upper:
            return phase, modifier
    return phases[-1][1], phases[-1][2]


def _block_phase(week: int, weeks: int) -> tuple[str, str]:
    block_size = max(2, weeks // 3)
    index = min((week - 1) // block_size, len(BLOCK_PHASES) - 1)
    return BLOCK_PHASES[index]


def _week_phase(style: Periodization, week: int, weeks: int) -> tuple[str, str]:
    if weeks >= DELOAD_MIN_WEEKS and week == weeks:
        return DELOAD
    if style == Periodization.linear:
        return _by_progress(week, weeks, LINEAR_PHASES)
    if style == Periodization.reverse_linear:
        return _by_progress(week, weeks, REVERSE_LINEAR_PHASES)
    if style == Periodization.undulating:
        return "Undulating", UNDULATING_MODIFIERS[(week - 1) % len(UNDULATING_MODIFIERS)]
    if style == Periodization.block:
        return _block_phase(week, weeks)
    return "General Training", "moderate"


def get_week_phases(periodization, duration_weeks: int) -> list[WeekPhase]:
    style = _coerce(Periodization, periodization, Periodization.none)
    return [
        WeekPhase(week, *_week_phase(style, week, duration_weeks))
        for week in range(1, duration_weeks + 1)
    ]


def get_day_numbers(sessions_per_week: int, preferred_days: Sequence[int] | None = None) -> list[int]:
    if preferred_days and len(preferred_days) == sessions_per_week:
        return list(preferred_days)
    return list(DEFAULT_DAY_SPREADS.get(sessions_per_week, DEFAULT_DAY_SPREADS[3]))


def build_plan(
    split_style,
    periodization,
    duration_weeks: int,
    sessions_per_week: int,
    preferred_days: Sequence[int] | None = None,
) -> list[SessionPlanSlot]:
    """
    Materialize every (week, training day) slot of a program.

    Unknown split or periodization values fall back to full body and
    "none" respectively; session counts are clamped to 1..7.
    """
    sessions_per_week = min(max(int(sessions_per_week), 1), 7)
    templates = get_day_templates(split_style, sessions_per_week)
    day_numbers = get_day_numbers(sessions_per_week, preferred_days)

    slots = []
    for wp in get_week_phases(periodization, max(int(duration_weeks), 0)):
        for template, day in zip(templates, day_numbers):
            slots.append(SessionPlanSlot(
                week_number=wp.week_number,
                day_of_week=day,
                phase=wp.phase,
                intensity_modifier=wp.intensity_modifier,
                label=template.label,
                focus=template.focus,
                slot_id=f"w{wp.week_number}d{day}",
            ))
    return slots
