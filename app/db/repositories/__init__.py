"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout import WorkoutRepository
from app.db.repositories.goal import GoalRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "WorkoutRepository",
    "GoalRepository",
]
