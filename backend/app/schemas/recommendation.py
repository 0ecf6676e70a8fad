from pydantic import BaseModel

from app.schemas.enums import Confidence, Trend

class WeightRecommendation(BaseModel):
    recommended_kg: float | None = None
    reasoning: str
    confidence: Confidence
    estimated_1rm: float | None = None
    last_weight_kg: float | None = None
    last_rpe: float | None = None
    trend: Trend

class RecommendationRead(BaseModel):
    exercise_id: int
    user_id: int
    recommendation: WeightRecommendation
    display: str   # recommended load in the client's unit, "--" when none
