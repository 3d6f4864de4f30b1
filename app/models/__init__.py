"""SQLModel database models."""

from app.models.user import User
from app.models.exercise import Exercise
from app.models.workout import ExerciseLog, SetLog, WorkoutSession
from app.models.goal import BodyPartGoal

__all__ = [
    "User",
    "Exercise",
    "WorkoutSession",
    "ExerciseLog",
    "SetLog",
    "BodyPartGoal",
]
