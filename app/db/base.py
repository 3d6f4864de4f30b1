"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
from app.models.workout import WorkoutSession, ExerciseLog, SetLog  # noqa: F401
from app.models.goal import BodyPartGoal  # noqa: F401
