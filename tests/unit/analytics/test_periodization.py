"""
Unit tests for periodization: weekly metrics, phase detection and next-phase advice.
"""

import datetime

import pytest

from app.analytics.periodization import (DEFAULT_CONFIG, START_RECOMMENDATION, classify_week, identify_phases,
                                         recommend_next_phase, summarize_periodization, weekly_metrics,
                                         weeks_since_deload, )
from app.schemas.periodization import PeriodizationSummary, TrainingPhase, WeekMetrics
from builders import AS_OF, TrainingBuilder, days_ago


def _week(volume: float, intensity: float = 75.0) -> WeekMetrics:
    return WeekMetrics(week_start=datetime.date(2026, 3, 16), total_volume=volume, average_intensity=intensity)


def _phase(phase_type: str, weeks: int = 1) -> TrainingPhase:
    return TrainingPhase(type=phase_type, week_start=datetime.date(2026, 3, 2), week_end=datetime.date(2026, 3, 16),
                         weeks=weeks, volume=1000, intensity=75, )


# ======================================================================
# weekly_metrics
# ======================================================================


class TestWeeklyMetrics:
    def test_groups_by_monday(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        builder.workout(days_ago(2), squat, [(100, 10)])  # Monday
        builder.workout(days_ago(0), squat, [(100, 5), (100, 5)])  # Wednesday, same week
        builder.workout(days_ago(9), squat, [(80, 10)])

        metrics = weekly_metrics(builder.build())

        assert [m.week_start for m in metrics] == [datetime.date(2026, 3, 9), datetime.date(2026, 3, 16)]
        current = metrics[1]
        assert current.workout_count == 2
        assert current.total_sets == 3
        assert current.total_volume == 2000
        # mean of 100 / (1 + reps / 30) over the three sets
        assert current.average_intensity == pytest.approx((75.0 + 2 * 100 / (1 + 5 / 30)) / 3)

    def test_unweighted_and_incomplete_sets_ignored(self):
        builder = TrainingBuilder()
        pullup = builder.exercise("Pull-up", "back")
        session = builder.workout(days_ago(1), pullup, [(None, 12)])
        builder.add_set(builder.log(session, pullup), 50, 5, completed=False)
        builder.workout(days_ago(0), pullup, [(40, 5)], minutes=None)

        metrics = weekly_metrics(builder.build())

        assert len(metrics) == 1
        assert metrics[0].workout_count == 1
        assert metrics[0].total_sets == 0
        assert metrics[0].total_volume == 0
        assert metrics[0].average_intensity == 0


# ======================================================================
# classify_week / identify_phases
# ======================================================================


class TestClassifyWeek:
    @pytest.mark.parametrize(
        "volume, intensity, expected",
        [
            (500, 75, "deload"),
            (1000, 90, "intensification"),
            (1300, 70, "accumulation"),
            (1000, 75, "transition"),
            (1300, 90, "transition"),
        ],
    )
    def test_thresholds(self, volume, intensity, expected):
        assert classify_week(_week(volume, intensity), 1000, 75) == expected

    def test_zero_averages_read_as_average_week(self):
        assert classify_week(_week(0, 0), 0, 0) == "transition"


class TestIdentifyPhases:
    def test_empty(self):
        assert identify_phases([]) == []

    def test_consecutive_weeks_merge(self):
        metrics = [_week(1000), _week(1000), _week(1000), _week(200)]

        phases = identify_phases(metrics)

        assert [(p.type, p.weeks) for p in phases] == [("accumulation", 3), ("deload", 1)]
        assert phases[0].volume == 3000
        assert phases[0].characteristics
        assert phases[1].recommendation


# ======================================================================
# recommend_next_phase
# ======================================================================


class TestRecommendNextPhase:
    def test_no_phases(self):
        assert recommend_next_phase([], 0) == ("accumulation", START_RECOMMENDATION)

    def test_weeks_since_deload_counts_weeks_not_phases(self):
        phases = [_phase("deload"), _phase("accumulation", 3), _phase("transition", 2)]
        assert weeks_since_deload(phases) == 5

    def test_deload_overdue(self):
        phases = [_phase("accumulation", 4), _phase("transition", 3)]

        next_phase, message = recommend_next_phase(phases, 2)

        assert next_phase == "deload"
        assert "7 weeks" in message

    @pytest.mark.parametrize(
        "history, weeks_in_phase, expected",
        [
            (["accumulation"], DEFAULT_CONFIG.accumulation_weeks, "intensification"),
            (["accumulation"], 1, "accumulation"),
            (["intensification"], DEFAULT_CONFIG.intensification_weeks, "deload"),
            (["intensification"], 1, "intensification"),
            (["intensification", "deload"], 0, "accumulation"),
            (["accumulation", "transition"], 0, "intensification"),
            (["intensification", "transition"], 0, "deload"),
            (["deload", "transition"], 0, "accumulation"),
            (["transition"], 0, "accumulation"),
        ],
    )
    def test_phase_rules(self, history, weeks_in_phase, expected):
        phases = [_phase(phase_type) for phase_type in history]
        assert recommend_next_phase(phases, weeks_in_phase)[0] == expected

    def test_remaining_weeks_in_message(self):
        _, message = recommend_next_phase([_phase("accumulation")], 1)
        assert "3 more weeks" in message


# ======================================================================
# summarize_periodization
# ======================================================================


class TestSummarizePeriodization:
    def test_no_sessions(self):
        summary = summarize_periodization(TrainingBuilder().build(), AS_OF)

        assert summary.current_phase is None
        assert summary.phase_history == []
        assert summary.recommended_next_phase == "accumulation"
        assert summary.recommendation == START_RECOMMENDATION

    def test_empty_default_has_no_recommendation(self):
        assert PeriodizationSummary().recommendation == ""

    def test_deload_after_accumulation(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        for days in (23, 16, 9):
            builder.workout(days_ago(days), squat, [(100, 10)])
        builder.workout(days_ago(2), squat, [(20, 10)])

        summary = summarize_periodization(builder.build(), AS_OF)

        assert [(p.type, p.weeks) for p in summary.phase_history] == [("accumulation", 3), ("deload", 1)]
        assert summary.current_phase.type == "deload"
        assert summary.current_phase.week_start == datetime.date(2026, 3, 16)
        assert summary.weeks_since_phase_change == 0
        assert summary.recommended_next_phase == "accumulation"

    def test_long_accumulation_moves_to_intensification(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        builder.workout(days_ago(37), squat, [(10, 10)])
        for days in (30, 23, 16, 9, 2):
            builder.workout(days_ago(days), squat, [(100, 10)])

        summary = summarize_periodization(builder.build(), AS_OF)

        assert [(p.type, p.weeks) for p in summary.phase_history] == [("deload", 1), ("accumulation", 5)]
        assert summary.current_phase.week_start == datetime.date(2026, 2, 16)
        assert summary.weeks_since_phase_change == 4
        assert summary.recommended_next_phase == "intensification"

    def test_heavy_week_reads_as_intensification(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        for days in (16, 9):
            builder.workout(days_ago(days), squat, [(100, 10), (100, 10)])
        builder.workout(days_ago(2), squat, [(150, 3), (150, 3), (150, 3)])

        summary = summarize_periodization(builder.build(), AS_OF)

        assert [p.type for p in summary.phase_history] == ["accumulation", "intensification"]
        assert summary.recommended_next_phase == "intensification"

    def test_steady_training_without_deload(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        for days in (44, 37, 30, 23, 16, 9, 2):
            builder.workout(days_ago(days), squat, [(100, 10)])

        summary = summarize_periodization(builder.build(), AS_OF)

        assert [(p.type, p.weeks) for p in summary.phase_history] == [("transition", 7)]
        assert summary.recommended_next_phase == "deload"

    def test_sessions_after_as_of_ignored(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        builder.workout(days_ago(2), squat, [(100, 10)])
        builder.workout(AS_OF + datetime.timedelta(days=2), squat, [(20, 10)])

        summary = summarize_periodization(builder.build(), AS_OF)

        assert len(summary.weekly_metrics) == 1
        assert summary.current_phase.type == "transition"
