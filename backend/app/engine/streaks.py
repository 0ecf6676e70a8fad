from datetime import date, datetime, timedelta
from typing import Iterable

MAX_STREAK_DAYS = 365


def compute_current_streak(workout_days: Iterable[date | datetime], today: date) -> int:
    """
    Consecutive calendar days with at least one workout.

    The run has to reach today or yesterday; a streak whose last workout is
    older than that is already broken and counts as 0.
    """
    days = {d.date() if isinstance(d, datetime) else d for d in workout_days}
    if today in days:
        cursor = today
    elif today - timedelta(days=1) in days:
        cursor = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while cursor in days and streak < MAX_STREAK_DAYS:
        streak += 1
        cursor -= timedelta(days=1)
    return streak
