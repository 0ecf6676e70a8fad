"""
Adaptive training engine.

Pure functions over already-fetched data: no database, network or clock
access. Callers fetch history, call in, and persist what comes back.
"""
from .plan_builder import build_plan
from .load_recommendation import compute_trend, recommend_load
from .records import check_streak_milestone, check_workout_count_milestone, detect_records
from .streaks import compute_current_streak

__all__ = [
    'build_plan',
    'recommend_load',
    'compute_trend',
    'detect_records',
    'check_streak_milestone',
    'check_workout_count_milestone',
    'compute_current_streak',
]
