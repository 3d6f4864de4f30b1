"""Workout analytics: pure reducers over a user's logged training rows."""

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import SetRecord, TrainingData

__all__ = ["UserContext", "run_aggregation", "SetRecord", "TrainingData"]
