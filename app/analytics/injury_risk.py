"""
Injury-risk analysis: heuristic factors and a bounded risk score.

This is an **attention signal**, not a diagnosis.  Four detectors each emit
zero or more :class:`InjuryRiskFactor` objects:

1. **Volume spikes** - weekly volume compared week over week.  Weeks are
   7-day buckets counted from the first completed session of the window.
2. **Imbalances** - antagonist body-part pairs (ratio of the larger to the
   smaller volume) plus unilateral exercises whose left/right symmetry
   risk is moderate or high.
3. **Overtraining** - session frequency in the last 7 days, no deload week
   over a long block, and estimated 1RM dropping while volume holds.
4. **Neglected stabilizers** - stabilising body parts with no, or a very
   small, share of the total volume.

Scoring
-------
Each factor adds points by severity (high 25, moderate 15, low 5); the sum
is capped at 100.  Adding a factor never lowers the score.  The score is
bucketed as ``low`` (<30), ``moderate`` (<60) or ``high``.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData
from app.analytics.strength import epley_one_rm
from app.analytics.symmetry import build_symmetry_metrics
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import ANTAGONIST_PAIRS, STABILIZER_BODY_PARTS, Severity
from app.schemas.common import AnalyticsResult
from app.schemas.injury_risk import InjuryRiskFactor, InjuryRiskSummary

VOLUME_SPIKE = "volume_spike"
IMBALANCE = "imbalance"
OVERTRAINING = "overtraining"
NEGLECTED_STABILIZER = "neglected_stabilizer"

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_SEVERITY_POINTS: dict[str, int] = {
    Severity.HIGH.value: 25,
    Severity.MODERATE.value: 15,
    Severity.LOW.value: 5,
}


class InjuryRiskConfig(BaseModel):
    """Thresholds for every detector and for score bucketing."""

    spike_moderate_pct: float = Field(30.0, description="Week-over-week increase above which a spike is moderate")
    spike_high_pct: float = 50.0

    antagonist_moderate_pct: float = Field(25.0, description="(ratio - 1) * 100 above which a pair is imbalanced")
    antagonist_high_pct: float = 40.0

    frequency_moderate: int = Field(6, description="Sessions completed in the last 7 days")
    frequency_high: int = 7

    deload_drop_pct: float = Field(20.0, description="Week-over-week drop that counts as a deload")
    deload_lookback_weeks: int = 8
    deload_min_weeks: int = 6

    performance_window_days: int = Field(14, description="Length of the recent and prior comparison windows")
    performance_drop_pct: float = 5.0
    performance_min_exercises: int = 2
    performance_moderate_share: float = 0.5
    performance_high_share: float = 0.75

    stabilizer_min_share_pct: float = 2.0

    severity_points: dict[str, int] = Field(default_factory=lambda: dict(_DEFAULT_SEVERITY_POINTS))
    moderate_score: int = 30
    high_score: int = 60


DEFAULT_CONFIG = InjuryRiskConfig()


# ======================================================================
# Weekly volume
# ======================================================================


def weekly_volumes(data: TrainingData) -> list[float]:
    """Volume per 7-day bucket counted from the earliest completion.

    Weeks without sessions are kept as ``0.0`` so that a week off reads as
    a drop.
    """
    sessions = [s for s in data.sessions if s.is_completed]
    if not sessions:
        return []

    first = min(s.completed_at for s in sessions)
    week_of = {s.id: int((s.completed_at - first) / datetime.timedelta(weeks=1)) for s in sessions}

    volumes = [0.0] * (max(week_of.values()) + 1)
    for record in data.iter_sets():
        volumes[week_of[record.session.id]] += record.volume
    return volumes


# ======================================================================
# Detectors
# ======================================================================


def detect_volume_spikes(volumes: list[float], config: Optional[InjuryRiskConfig] = None) -> list[InjuryRiskFactor]:
    cfg = config or DEFAULT_CONFIG
    factors = []
    for i in range(1, len(volumes)):
        previous, current = volumes[i - 1], volumes[i]
        if previous <= 0:
            continue
        increase = (current - previous) / previous * 100

        if increase > cfg.spike_high_pct:
            factors.append(InjuryRiskFactor(
                type=VOLUME_SPIKE,
                severity=Severity.HIGH.value,
                description=f"Sharp training volume increase of {increase:.0f}% in week {i + 1}",
                recommendation="Cut training volume by 20-30% next week to give your body time to adapt.",
                value=round(increase, 2),
            ))
        elif increase > cfg.spike_moderate_pct:
            factors.append(InjuryRiskFactor(
                type=VOLUME_SPIKE,
                severity=Severity.MODERATE.value,
                description=f"Significant training volume increase of {increase:.0f}% in week {i + 1}",
                recommendation="Watch for fatigue and consider holding volume steady next week.",
                value=round(increase, 2),
            ))
    return factors


def detect_imbalances(data: TrainingData, config: Optional[InjuryRiskConfig] = None) -> list[InjuryRiskFactor]:
    cfg = config or DEFAULT_CONFIG
    factors = []
    volumes = data.volume_by_body_part()

    for first, second in ANTAGONIST_PAIRS:
        vol1 = volumes.get(first.value, 0.0)
        vol2 = volumes.get(second.value, 0.0)
        if vol1 <= 0 or vol2 <= 0:
            continue

        difference = (max(vol1, vol2) / min(vol1, vol2) - 1) * 100
        stronger = first.value if vol1 > vol2 else second.value
        weaker = second.value if vol1 > vol2 else first.value

        if difference > cfg.antagonist_high_pct:
            factors.append(InjuryRiskFactor(
                type=IMBALANCE,
                severity=Severity.HIGH.value,
                body_part=stronger,
                description=f"Significant imbalance between {first.value} and {second.value} ({difference:.0f}%)",
                recommendation=f"Increase training volume for {weaker} by 30-50%.",
                value=round(difference, 2),
            ))
        elif difference > cfg.antagonist_moderate_pct:
            factors.append(InjuryRiskFactor(
                type=IMBALANCE,
                severity=Severity.MODERATE.value,
                body_part=stronger,
                description=f"Imbalance between {first.value} and {second.value} ({difference:.0f}%)",
                recommendation=f"Consider adding 1-2 exercises for {weaker}.",
                value=round(difference, 2),
            ))

    for metric in build_symmetry_metrics(data):
        if metric.risk_level == Severity.LOW.value:
            continue
        exercise = data.exercise(metric.exercise_id)
        weaker_side = "right" if metric.stronger_side == "left" else "left"
        factors.append(InjuryRiskFactor(
            type=IMBALANCE,
            severity=metric.risk_level,
            body_part=exercise.target_body_part if exercise else None,
            description=(f"Left/right imbalance on {metric.exercise_name} "
                         f"({metric.imbalance_percentage:.0f}%, {metric.stronger_side} side stronger)"),
            recommendation=f"Start sets with the {weaker_side} side and match its reps on the other side.",
            value=metric.imbalance_percentage,
        ))
    return factors


def _frequency_factor(data: TrainingData, as_of: datetime.datetime,
                      cfg: InjuryRiskConfig) -> Optional[InjuryRiskFactor]:
    week_ago = as_of - datetime.timedelta(days=7)
    count = sum(1 for s in data.sessions if s.is_completed and s.completed_at >= week_ago)

    if count >= cfg.frequency_high:
        return InjuryRiskFactor(
            type=OVERTRAINING,
            severity=Severity.HIGH.value,
            description=f"Very high training frequency: {count} sessions in the last week",
            recommendation="Schedule 1-2 rest days. Your body needs time to recover.",
            value=count,
        )
    if count >= cfg.frequency_moderate:
        return InjuryRiskFactor(
            type=OVERTRAINING,
            severity=Severity.MODERATE.value,
            description=f"High training frequency: {count} sessions in the last week",
            recommendation="Consider a rest day or a light recovery session.",
            value=count,
        )
    return None


def _deload_factor(volumes: list[float], cfg: InjuryRiskConfig) -> Optional[InjuryRiskFactor]:
    recent = volumes[-cfg.deload_lookback_weeks:]
    if len(recent) < cfg.deload_min_weeks:
        return None

    for previous, current in zip(recent, recent[1:]):
        if previous > 0 and (previous - current) / previous * 100 > cfg.deload_drop_pct:
            return None

    return InjuryRiskFactor(
        type=OVERTRAINING,
        severity=Severity.MODERATE.value,
        description=f"No deload week in the last {len(recent)} weeks",
        recommendation="Plan a deload week (cut volume by 40-50%) to avoid overreaching.",
        value=len(recent),
    )


def _best_marks(data: TrainingData, start: datetime.datetime,
                end: datetime.datetime) -> dict[int, tuple[float, float]]:
    """exercise_id → (best estimated 1RM, volume) for sessions completed in (start, end]."""
    marks: dict[int, tuple[float, float]] = {}
    for record in data.iter_sets():
        if not start < record.session.completed_at <= end:
            continue
        one_rm = epley_one_rm(record.weight, record.set_log.reps)
        best, volume = marks.get(record.exercise.id, (0.0, 0.0))
        marks[record.exercise.id] = (max(best, one_rm), volume + record.volume)
    return marks


def _performance_factor(data: TrainingData, as_of: datetime.datetime,
                        cfg: InjuryRiskConfig) -> Optional[InjuryRiskFactor]:
    window = datetime.timedelta(days=cfg.performance_window_days)
    recent = _best_marks(data, as_of - window, as_of)
    prior = _best_marks(data, as_of - 2 * window, as_of - window)

    common = [exercise_id for exercise_id in recent if exercise_id in prior]
    if len(common) < cfg.performance_min_exercises:
        return None

    declining = 0
    for exercise_id in common:
        recent_best, recent_volume = recent[exercise_id]
        prior_best, prior_volume = prior[exercise_id]
        dropped = recent_best < prior_best * (1 - cfg.performance_drop_pct / 100)
        if dropped and recent_volume >= prior_volume:
            declining += 1

    share = declining / len(common)
    if share < cfg.performance_moderate_share:
        return None

    severity = Severity.HIGH.value if share >= cfg.performance_high_share else Severity.MODERATE.value
    return InjuryRiskFactor(
        type=OVERTRAINING,
        severity=severity,
        description=(f"Estimated strength dropped on {declining} of {len(common)} exercises "
                     "while volume held or increased"),
        recommendation="Reduce intensity for a week and prioritise sleep and nutrition.",
        value=round(share * 100, 2),
    )


def detect_overtraining(data: TrainingData, as_of: datetime.datetime, volumes: list[float],
                        config: Optional[InjuryRiskConfig] = None, ) -> list[InjuryRiskFactor]:
    cfg = config or DEFAULT_CONFIG
    candidates = [
        _frequency_factor(data, as_of, cfg),
        _deload_factor(volumes, cfg),
        _performance_factor(data, as_of, cfg),
    ]
    return [f for f in candidates if f is not None]


def detect_neglected_stabilizers(data: TrainingData,
                                 config: Optional[InjuryRiskConfig] = None) -> list[InjuryRiskFactor]:
    cfg = config or DEFAULT_CONFIG
    volumes = data.volume_by_body_part()
    total = data.total_volume()
    factors = []

    for part in STABILIZER_BODY_PARTS:
        volume = volumes.get(part.value, 0.0)
        if volume <= 0:
            factors.append(InjuryRiskFactor(
                type=NEGLECTED_STABILIZER,
                severity=Severity.MODERATE.value,
                body_part=part.value,
                description=f"Stabilizer completely neglected: {part.value}",
                recommendation=f"Add exercises for {part.value} to improve stability and prevent injury.",
                value=0.0,
            ))
            continue

        share = volume / total * 100 if total > 0 else 0.0
        if share < cfg.stabilizer_min_share_pct:
            factors.append(InjuryRiskFactor(
                type=NEGLECTED_STABILIZER,
                severity=Severity.LOW.value,
                body_part=part.value,
                description=f"Low share of {part.value} in your training ({share:.1f}%)",
                recommendation=f"Consider more work for {part.value}.",
                value=round(share, 2),
            ))
    return factors


# ======================================================================
# Scoring
# ======================================================================


def calculate_risk_score(factors: list[InjuryRiskFactor], config: Optional[InjuryRiskConfig] = None) -> int:
    cfg = config or DEFAULT_CONFIG
    score = sum(cfg.severity_points.get(f.severity, 0) for f in factors)
    return min(score, 100)


def label_overall_risk(score: int, config: Optional[InjuryRiskConfig] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    if score < cfg.moderate_score:
        return Severity.LOW.value
    if score < cfg.high_score:
        return Severity.MODERATE.value
    return Severity.HIGH.value


# ======================================================================
# Reducer / entry point
# ======================================================================


def summarize_injury_risk(data: TrainingData, as_of: datetime.datetime,
                          config: Optional[InjuryRiskConfig] = None, ) -> InjuryRiskSummary:
    cfg = config or DEFAULT_CONFIG
    data = data.until(as_of)
    if data.is_empty:
        return InjuryRiskSummary()

    volumes = weekly_volumes(data)
    factors = [
        *detect_volume_spikes(volumes, cfg),
        *detect_imbalances(data, cfg),
        *detect_overtraining(data, as_of, volumes, cfg),
        *detect_neglected_stabilizers(data, cfg),
    ]
    score = calculate_risk_score(factors, cfg)

    return InjuryRiskSummary(
        overall_risk=label_overall_risk(score, cfg),
        risk_score=score,
        factors=factors,
        volume_spikes=[f for f in factors if f.type == VOLUME_SPIKE],
        imbalances=[f for f in factors if f.type == IMBALANCE],
        overtraining_indicators=[f for f in factors if f.type == OVERTRAINING],
        neglected_stabilizers=[f for f in factors if f.type == NEGLECTED_STABILIZER],
    )


def compute_injury_risk(session: Session, ctx: Optional[UserContext], weeks: Optional[int] = None,
                        config: Optional[InjuryRiskConfig] = None, ) -> AnalyticsResult[InjuryRiskSummary]:
    """Injury risk over sessions completed in the trailing *weeks* (default from settings)."""
    window = weeks or settings.INJURY_RISK_WEEKS
    repo = WorkoutRepository(session)
    return run_aggregation(
        "injury risk",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - datetime.timedelta(weeks=window),
                                                until=c.as_of, window_field="completed_at", ),
        reduce=lambda data, c: summarize_injury_risk(data, c.as_of, config),
        empty=InjuryRiskSummary,
    )
