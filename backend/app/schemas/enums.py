from enum import Enum

class UserRole(str, Enum):
    client = "client"
    coach = "coach"
    admin = "admin"

class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"
    prefer_not_to_say = "prefer_not_to_say"

class ExperienceLevel(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"
    elite = "elite"

class MovementPattern(str, Enum):
    squat = "squat"
    hinge = "hinge"
    push = "push"
    pull = "pull"
    lunge = "lunge"
    carry = "carry"
    rotation = "rotation"
    isometric = "isometric"
    locomotion = "locomotion"

class SplitStyle(str, Enum):
    full_body = "full_body"
    upper_lower = "upper_lower"
    push_pull_legs = "push_pull_legs"
    push_pull = "push_pull"
    body_part = "body_part"
    movement_pattern = "movement_pattern"
    custom = "custom"

class Periodization(str, Enum):
    linear = "linear"
    undulating = "undulating"
    block = "block"
    reverse_linear = "reverse_linear"
    none = "none"

class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"
    none = "none"

class Trend(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"
    insufficient_data = "insufficient_data"

class RecordKind(str, Enum):
    weight = "weight"
    reps = "reps"
    volume = "volume"
    estimated_1rm = "estimated_1rm"

class AchievementType(str, Enum):
    pr = "pr"
    streak = "streak"
    milestone = "milestone"

class WeightUnit(str, Enum):
    kg = "kg"
    lbs = "lbs"
