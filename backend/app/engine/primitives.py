"""
Numeric helpers shared by the training engine.

All weights are kilograms. Rounding is half-up so a value sitting exactly
between two steps always moves to the heavier one.
"""
import math
import re

from app.schemas.enums import WeightUnit

KG_TO_LBS = 2.20462

REPS_RE = re.compile(r"(\d+)")


def round_to_step(value: float, step: float) -> float:
    """Round ``value`` half-up to the nearest multiple of ``step``."""
    return math.floor(value / step + 0.5) * step


def estimate_1rm(weight_kg: float, reps: int) -> float:
    """Epley estimate of a one-rep max from a sub-maximal set."""
    if reps <= 1 or weight_kg <= 0:
        return weight_kg
    return weight_kg * (1 + reps / 30)


def weight_from_intensity(one_rep_max: float, intensity_pct: float) -> float:
    """Working weight at a percentage of 1RM, to the nearest 0.5 kg."""
    return round_to_step(one_rep_max * intensity_pct / 100, 0.5)


def parse_reps(reps) -> int | None:
    """
    Read a rep count from a logged value.

    Ranges like "8-12" resolve to their lower end. Anything without a digit
    is treated as unknown.
    """
    if reps is None:
        return None
    if isinstance(reps, int):
        return reps
    match = REPS_RE.search(str(reps))
    return int(match.group(1)) if match else None


def format_kg(value: float | None, *, grouped: bool = False) -> str:
    """Format a load without a trailing ``.0`` (80 -> "80", 82.5 -> "82.5")."""
    if value is None:
        return ""
    if abs(value - round(value)) < 1e-9:
        whole = int(round(value))
        return f"{whole:,}" if grouped else str(whole)
    # Keep up to 3 decimals for small plate and cable increments.
    text = f"{value:,.3f}" if grouped else f"{value:.3f}"
    return text.rstrip("0").rstrip(".")


def display_weight(kg: float | None, unit: WeightUnit) -> float | None:
    if kg is None:
        return None
    if unit == WeightUnit.kg:
        return kg
    return round_to_step(kg * KG_TO_LBS, 0.1)


def to_kg(value: float, unit: WeightUnit) -> float:
    """Convert a user-entered value back to kilograms for storage."""
    if unit == WeightUnit.kg:
        return value
    return round_to_step(value / KG_TO_LBS, 0.1)


def format_weight(kg: float | None, unit: WeightUnit) -> str:
    """Format as "80 kg" or "176.4 lbs", or "--" when there is no weight."""
    value = display_weight(kg, unit)
    if value is None:
        return "--"
    return f"{format_kg(round(value, 1))} {unit.value}"
