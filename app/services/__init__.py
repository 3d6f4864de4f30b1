"""Business logic services."""

from app.services.user_service import UserService
from app.services.goal_service import GoalService
from app.services.workout_service import WorkoutService
from app.services.exercise_service import ExerciseService

__all__ = [
    "UserService",
    "GoalService",
    "WorkoutService",
    "ExerciseService",
]
