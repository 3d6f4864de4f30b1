"""
Periodization analysis: weekly load metrics, training phases and what to do next.

Weekly metrics
--------------
One row per Monday-anchored week that has at least one completed session in
the trailing window (default 12 weeks).  Only sets with both a weight and
reps count:

    total_volume       = Σ weight × reps
    average_intensity  = mean of weight / epley_one_rm(weight, reps) × 100
    total_sets         = number of counted sets

Phases
------
Each week is compared with the window's average volume and intensity:

    volume ratio < 0.6                             → deload
    intensity ratio > 1.1 and volume ratio < 1.1   → intensification
    volume ratio > 1.1 and intensity ratio < 1.1   → accumulation
    otherwise                                      → transition

Consecutive weeks with the same classification form one phase.  The last
phase is the current one.

Next phase
----------
- more than 6 trained weeks since the last deload → deload
- accumulation for 4+ weeks → intensification, else keep accumulating
- intensification for 3+ weeks → deload, else keep intensifying
- deload → accumulation
- transition → follows the phase before it (accumulation → intensification,
  intensification → deload), accumulation otherwise
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData, week_start
from app.analytics.strength import epley_one_rm
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import PhaseType
from app.schemas.common import AnalyticsResult
from app.schemas.periodization import PeriodizationSummary, TrainingPhase, WeekMetrics


class PeriodizationConfig(BaseModel):
    deload_volume_ratio: float = 0.6
    high_ratio: float = 1.1
    max_weeks_without_deload: int = 6
    accumulation_weeks: int = 4
    intensification_weeks: int = 3


DEFAULT_CONFIG = PeriodizationConfig()

START_RECOMMENDATION = ("Start with an accumulation phase: high volume at moderate intensity "
                        "for 3-4 weeks.")

PHASE_CHARACTERISTICS: dict[str, list[str]] = {
    PhaseType.ACCUMULATION.value: [
        "High training volume",
        "Moderate intensity",
        "Builds a work capacity base",
        "More reps with lighter loads",
    ],
    PhaseType.INTENSIFICATION.value: [
        "High intensity with heavier loads",
        "Lower training volume",
        "Fewer reps per set",
        "Focus on maximal strength",
    ],
    PhaseType.DELOAD.value: [
        "Sharply reduced volume",
        "Recovery period",
        "Allows supercompensation",
        "Prepares the next cycle",
    ],
    PhaseType.TRANSITION.value: [
        "Balanced volume and intensity",
        "Bridge between phases",
        "Good for maintaining form",
    ],
}

PHASE_RECOMMENDATIONS: dict[str, str] = {
    PhaseType.ACCUMULATION.value: "Keep accumulating for 3-4 weeks, then move on to intensification.",
    PhaseType.INTENSIFICATION.value: "Intensification should last 2-3 weeks. Follow it with a deload week.",
    PhaseType.DELOAD.value: "A deload week is key for recovery. Return to accumulation afterwards.",
    PhaseType.TRANSITION.value: "Decide whether to raise volume (accumulation) or intensity (intensification).",
}


# ======================================================================
# Weekly metrics
# ======================================================================


def weekly_metrics(data: TrainingData) -> list[WeekMetrics]:
    """Per-week volume, intensity and set counts, oldest week first."""
    weeks: dict[datetime.date, WeekMetrics] = {}
    for session in data.completed_sessions():
        week = week_start(session.started_at)
        metric = weeks.setdefault(week, WeekMetrics(week_start=week))
        metric.workout_count += 1

    intensity_sums: dict[datetime.date, float] = {}
    for record in data.iter_sets():
        weight, reps = record.weight, record.set_log.reps
        if weight <= 0 or reps <= 0:
            continue
        week = week_start(record.session.started_at)
        metric = weeks[week]
        metric.total_volume += weight * reps
        metric.total_sets += 1
        intensity_sums[week] = intensity_sums.get(week, 0.0) + weight / epley_one_rm(weight, reps) * 100

    for week, metric in weeks.items():
        if metric.total_sets:
            metric.average_intensity = intensity_sums[week] / metric.total_sets
    return [weeks[week] for week in sorted(weeks)]


# ======================================================================
# Phases
# ======================================================================


def classify_week(week: WeekMetrics, avg_volume: float, avg_intensity: float,
                  config: Optional[PeriodizationConfig] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    # A zero average has nothing to compare against; read it as an average week.
    volume_ratio = week.total_volume / avg_volume if avg_volume > 0 else 1.0
    intensity_ratio = week.average_intensity / avg_intensity if avg_intensity > 0 else 1.0

    if volume_ratio < cfg.deload_volume_ratio:
        return PhaseType.DELOAD.value
    if intensity_ratio > cfg.high_ratio and volume_ratio < cfg.high_ratio:
        return PhaseType.INTENSIFICATION.value
    if volume_ratio > cfg.high_ratio and intensity_ratio < cfg.high_ratio:
        return PhaseType.ACCUMULATION.value
    return PhaseType.TRANSITION.value


def _build_phase(phase_type: str, weeks: list[WeekMetrics]) -> TrainingPhase:
    return TrainingPhase(
        type=phase_type,
        week_start=weeks[0].week_start,
        week_end=weeks[-1].week_start,
        weeks=len(weeks),
        volume=round(sum(w.total_volume for w in weeks), 2),
        intensity=round(sum(w.average_intensity for w in weeks) / len(weeks), 1),
        characteristics=list(PHASE_CHARACTERISTICS[phase_type]),
        recommendation=PHASE_RECOMMENDATIONS[phase_type],
    )


def identify_phases(metrics: list[WeekMetrics], config: Optional[PeriodizationConfig] = None) -> list[TrainingPhase]:
    """Group consecutive weeks with the same classification into phases."""
    if not metrics:
        return []

    avg_volume = sum(w.total_volume for w in metrics) / len(metrics)
    avg_intensity = sum(w.average_intensity for w in metrics) / len(metrics)

    phases = []
    current_type: Optional[str] = None
    current_weeks: list[WeekMetrics] = []
    for week in metrics:
        phase_type = classify_week(week, avg_volume, avg_intensity, config)
        if current_weeks and phase_type != current_type:
            phases.append(_build_phase(current_type, current_weeks))
            current_weeks = []
        current_type = phase_type
        current_weeks.append(week)
    phases.append(_build_phase(current_type, current_weeks))
    return phases


# ======================================================================
# Next phase
# ======================================================================


def weeks_since_deload(phases: list[TrainingPhase]) -> int:
    """Trained weeks after the most recent deload phase (all of them if none)."""
    weeks = 0
    for phase in reversed(phases):
        if phase.type == PhaseType.DELOAD.value:
            break
        weeks += phase.weeks
    return weeks


def recommend_next_phase(phases: list[TrainingPhase], weeks_in_phase: int,
                         config: Optional[PeriodizationConfig] = None) -> tuple[str, str]:
    """``(recommended_next_phase, recommendation)`` for the current phase."""
    cfg = config or DEFAULT_CONFIG
    if not phases:
        return PhaseType.ACCUMULATION.value, START_RECOMMENDATION

    without_deload = weeks_since_deload(phases)
    if without_deload > cfg.max_weeks_without_deload:
        return PhaseType.DELOAD.value, (f"{without_deload} weeks since the last deload. Take a recovery week "
                                        f"at 40-50% of your usual volume before the next cycle.")

    current = phases[-1].type
    if current == PhaseType.ACCUMULATION.value:
        if weeks_in_phase >= cfg.accumulation_weeks:
            return PhaseType.INTENSIFICATION.value, (
                f"{weeks_in_phase} weeks of accumulation done. Move to intensification: cut volume by 30% "
                f"and use heavier loads for fewer reps.")
        remaining = cfg.accumulation_weeks - weeks_in_phase
        return PhaseType.ACCUMULATION.value, (f"Week {weeks_in_phase} of accumulation. Keep going for "
                                              f"{remaining} more weeks before intensifying.")

    if current == PhaseType.INTENSIFICATION.value:
        if weeks_in_phase >= cfg.intensification_weeks:
            return PhaseType.DELOAD.value, (
                f"{weeks_in_phase} weeks of intensification done. Time for a deload week: halve the volume "
                f"and drop intensity by 20%.")
        remaining = cfg.intensification_weeks - weeks_in_phase
        return PhaseType.INTENSIFICATION.value, (f"Week {weeks_in_phase} of intensification. Keep going for "
                                                 f"{remaining} more weeks before deloading.")

    if current == PhaseType.DELOAD.value:
        return PhaseType.ACCUMULATION.value, ("After the deload, start a new cycle with 3-4 weeks of "
                                              "accumulation.")

    if len(phases) >= 2:
        previous = phases[-2].type
        if previous == PhaseType.ACCUMULATION.value:
            return PhaseType.INTENSIFICATION.value, ("Move from transition into intensification: heavier loads, "
                                                     "less volume.")
        if previous == PhaseType.INTENSIFICATION.value:
            return PhaseType.DELOAD.value, "After intensification, take a deload week before the next cycle."
    return PhaseType.ACCUMULATION.value, ("Start a new cycle with accumulation: high volume at moderate "
                                          "intensity.")


# ======================================================================
# Reducer / entry point
# ======================================================================


def summarize_periodization(data: TrainingData, as_of: datetime.datetime,
                            config: Optional[PeriodizationConfig] = None, ) -> PeriodizationSummary:
    data = data.until(as_of)
    if data.is_empty:
        return PeriodizationSummary(recommendation=START_RECOMMENDATION)

    metrics = weekly_metrics(data)
    phases = identify_phases(metrics, config)
    current = phases[-1]
    phase_started = datetime.datetime.combine(current.week_start, datetime.time.min)
    weeks_in_phase = max(0, (as_of - phase_started).days // 7)
    next_phase, recommendation = recommend_next_phase(phases, weeks_in_phase, config)

    return PeriodizationSummary(
        weekly_metrics=metrics,
        current_phase=current,
        phase_history=phases,
        weeks_since_phase_change=weeks_in_phase,
        recommended_next_phase=next_phase,
        recommendation=recommendation,
    )


def compute_periodization(session: Session, ctx: Optional[UserContext], weeks: Optional[int] = None,
                          config: Optional[PeriodizationConfig] = None,
                          ) -> AnalyticsResult[PeriodizationSummary]:
    """Periodization over sessions started in the trailing *weeks* (default from settings)."""
    window = weeks or settings.PERIODIZATION_WEEKS
    repo = WorkoutRepository(session)
    return run_aggregation(
        "periodization",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - datetime.timedelta(weeks=window),
                                                until=c.as_of, ),
        reduce=lambda data, c: summarize_periodization(data, c.as_of, config),
        empty=PeriodizationSummary,
    )
