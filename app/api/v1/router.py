"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, exercises, goals, users, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercises"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
api_router.include_router(
    goals.router, prefix="/goals", tags=["Goals"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
