"""
Analytics endpoints: one read-only pull per aggregation family.

Every response is an :class:`AnalyticsResult` envelope.  Requests without a
bearer token get the family's empty result; a failed fetch answers 503 with
the envelope's generic error.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.analytics.achievements import compute_achievements
from app.analytics.body_parts import compute_body_parts
from app.analytics.context import UserContext
from app.analytics.general import compute_general_stats
from app.analytics.goals import compute_goal_progress
from app.analytics.injury_risk import compute_injury_risk
from app.analytics.insights import compute_insights
from app.analytics.periodization import compute_periodization
from app.analytics.recommendations import compute_recommendations
from app.analytics.strength import compute_strength_stats
from app.analytics.symmetry import compute_symmetry
from app.analytics.trends import compute_trends
from app.api.dependencies import get_user_context
from app.db.session import get_db
from app.schemas.achievements import Achievements
from app.schemas.body_parts import BodyPartAnalysis
from app.schemas.common import AnalyticsResult
from app.schemas.general_stats import GeneralStats
from app.schemas.goal import GoalProgress
from app.schemas.injury_risk import InjuryRiskSummary
from app.schemas.insights import BodyPartInsight, ExerciseRecommendation
from app.schemas.periodization import PeriodizationSummary
from app.schemas.strength import StrengthStats
from app.schemas.symmetry import SymmetrySummary
from app.schemas.trends import TrendsStats

router = APIRouter()


def _respond(result: AnalyticsResult, response: Response) -> AnalyticsResult:
    if result.error is not None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@router.get("/general", summary="Workout totals, durations, habits and streaks.",
            response_model=AnalyticsResult[GeneralStats], )
def get_general_stats(response: Response, db: Session = Depends(get_db),
                      ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_general_stats(db, ctx), response)


@router.get("/strength", summary="Volume, personal records and muscle-group balance.",
            response_model=AnalyticsResult[StrengthStats], )
def get_strength_stats(response: Response, db: Session = Depends(get_db),
                       ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_strength_stats(db, ctx), response)


@router.get("/symmetry", summary="Left/right imbalance of unilateral exercises.",
            response_model=AnalyticsResult[SymmetrySummary], )
def get_symmetry(response: Response, weeks: Optional[int] = Query(None, ge=1, le=104, description="Trailing window"),
                 db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_symmetry(db, ctx, weeks), response)


@router.get("/injury-risk", summary="Injury-risk factors and overall score.",
            response_model=AnalyticsResult[InjuryRiskSummary], )
def get_injury_risk(response: Response, weeks: Optional[int] = Query(None, ge=1, le=104, description="Trailing window"),
                    db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_injury_risk(db, ctx, weeks), response)


@router.get("/goals", summary="Progress of every active body-part goal.",
            response_model=AnalyticsResult[list[GoalProgress]], )
def get_goal_progress(response: Response, db: Session = Depends(get_db),
                      ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_goal_progress(db, ctx), response)


@router.get("/insights", summary="Dashboard insight cards.",
            response_model=AnalyticsResult[list[BodyPartInsight]], )
def get_insights(response: Response, days: Optional[int] = Query(None, ge=1, le=365, description="Trailing window"),
                 db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_insights(db, ctx, days), response)


@router.get("/recommendations", summary="Body parts to train next, with matching exercises.",
            response_model=AnalyticsResult[list[ExerciseRecommendation]], )
def get_recommendations(response: Response,
                        days: Optional[int] = Query(None, ge=1, le=365, description="Trailing window"),
                        db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_recommendations(db, ctx, days), response)


@router.get("/body-parts", summary="Volume distribution, imbalances and undertrained body parts.",
            response_model=AnalyticsResult[BodyPartAnalysis], )
def get_body_parts(response: Response, db: Session = Depends(get_db),
                   ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_body_parts(db, ctx), response)


@router.get("/achievements", summary="Badges, recent records and top improvements.",
            response_model=AnalyticsResult[Achievements], )
def get_achievements(response: Response, db: Session = Depends(get_db),
                     ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_achievements(db, ctx), response)


@router.get("/trends", summary="Weekly progress, exercise progression and workout heatmap.",
            response_model=AnalyticsResult[TrendsStats], )
def get_trends(response: Response, weeks: Optional[int] = Query(None, ge=1, le=52, description="Trailing window"),
               db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_trends(db, ctx, weeks), response)


@router.get("/periodization", summary="Weekly load metrics, training phases and the recommended next phase.",
            response_model=AnalyticsResult[PeriodizationSummary], )
def get_periodization(response: Response,
                      weeks: Optional[int] = Query(None, ge=1, le=52, description="Trailing window"),
                      db: Session = Depends(get_db), ctx: Optional[UserContext] = Depends(get_user_context), ):
    return _respond(compute_periodization(db, ctx, weeks), response)
