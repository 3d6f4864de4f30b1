"""Pydantic schemas for request/response validation."""

from app.schemas.common import AnalyticsResult
from app.schemas.user import UserResponse
from app.schemas.exercise import ExerciseCreate, ExerciseResponse
from app.schemas.workout import (
    SetLogCreate,
    ExerciseLogCreate,
    WorkoutSessionCreate,
    WorkoutComplete,
    WorkoutSessionResponse,
)
from app.schemas.goal import GoalCreate, GoalUpdate, GoalResponse, GoalProgress
from app.schemas.general_stats import GeneralStats
from app.schemas.strength import StrengthStats
from app.schemas.symmetry import SymmetryMetric, SymmetrySummary
from app.schemas.injury_risk import InjuryRiskFactor, InjuryRiskSummary
from app.schemas.insights import BodyPartInsight, ExerciseRecommendation
from app.schemas.body_parts import BodyPartAnalysis
from app.schemas.achievements import Achievements
from app.schemas.trends import TrendsStats
from app.schemas.periodization import PeriodizationSummary, TrainingPhase, WeekMetrics

__all__ = [
    "AnalyticsResult",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "SetLogCreate",
    "ExerciseLogCreate",
    "WorkoutSessionCreate",
    "WorkoutComplete",
    "WorkoutSessionResponse",
    "GoalCreate",
    "GoalUpdate",
    "GoalResponse",
    "GoalProgress",
    "GeneralStats",
    "StrengthStats",
    "SymmetryMetric",
    "SymmetrySummary",
    "InjuryRiskFactor",
    "InjuryRiskSummary",
    "BodyPartInsight",
    "ExerciseRecommendation",
    "BodyPartAnalysis",
    "Achievements",
    "TrendsStats",
    "PeriodizationSummary",
    "TrainingPhase",
    "WeekMetrics",
]
