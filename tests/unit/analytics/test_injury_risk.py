"""
Unit tests for the injury-risk detectors and score.

The detectors are exercised one by one on in-memory rows; the summary
tests only check how factors are combined.
"""

import pytest

from app.analytics.injury_risk import (DEFAULT_CONFIG, IMBALANCE, NEGLECTED_STABILIZER, OVERTRAINING, VOLUME_SPIKE,
                                       InjuryRiskConfig, calculate_risk_score, detect_imbalances,
                                       detect_neglected_stabilizers, detect_overtraining, detect_volume_spikes,
                                       label_overall_risk, summarize_injury_risk, weekly_volumes, )
from app.models.enums import STABILIZER_BODY_PARTS
from app.schemas.injury_risk import InjuryRiskFactor, InjuryRiskSummary
from builders import AS_OF, TrainingBuilder, days_ago


# ======================================================================
# Helpers
# ======================================================================


def _make_factor(severity: str, type: str = VOLUME_SPIKE) -> InjuryRiskFactor:
    return InjuryRiskFactor(type=type, severity=severity, description="test", recommendation="test")


def _make_weekly(volumes_per_week: list[float]) -> TrainingBuilder:
    """One session per week, oldest first, ending this week."""
    builder = TrainingBuilder()
    bench = builder.exercise("Bench Press", "chest")
    count = len(volumes_per_week)
    for i, volume in enumerate(volumes_per_week):
        builder.workout(days_ago(7 * (count - 1 - i) + 1), bench, [(volume, 1)])
    return builder


# ======================================================================
# weekly_volumes
# ======================================================================


class TestWeeklyVolumes:
    def test_no_sessions(self):
        assert weekly_volumes(TrainingBuilder().build()) == []

    def test_buckets_from_first_completion(self):
        builder = _make_weekly([1000, 1200, 900])
        assert weekly_volumes(builder.build()) == [1000, 1200, 900]

    def test_weeks_off_are_zero(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        builder.workout(days_ago(22), bench, [(100, 10)])
        builder.workout(days_ago(1), bench, [(100, 10)])
        assert weekly_volumes(builder.build()) == [1000, 0, 0, 1000]


# ======================================================================
# detect_volume_spikes
# ======================================================================


class TestDetectVolumeSpikes:
    @pytest.mark.parametrize(
        "volumes, expected",
        [
            ([1000, 1290], []),
            ([1000, 1400], ["moderate"]),
            ([1000, 1500], ["moderate"]),
            ([1000, 1600], ["high"]),
            ([1000, 600, 1000], ["high"]),
            ([0, 5000], []),
            ([1000], []),
        ],
    )
    def test_thresholds(self, volumes, expected):
        factors = detect_volume_spikes(volumes)
        assert [f.severity for f in factors] == expected
        assert all(f.type == VOLUME_SPIKE for f in factors)

    def test_value_is_percentage_increase(self):
        factor = detect_volume_spikes([1000, 1400])[0]
        assert factor.value == 40
        assert "week 2" in factor.description

    def test_custom_thresholds(self):
        cfg = InjuryRiskConfig(spike_moderate_pct=10, spike_high_pct=20)
        assert [f.severity for f in detect_volume_spikes([1000, 1150], cfg)] == ["moderate"]


# ======================================================================
# detect_imbalances
# ======================================================================


class TestDetectImbalances:
    @pytest.mark.parametrize(
        "chest, back, expected",
        [
            (1000, 1000, []),
            (1250, 1000, []),
            (1300, 1000, ["moderate"]),
            (1500, 1000, ["high"]),
            (1000, 2000, ["high"]),
        ],
    )
    def test_antagonist_pair(self, chest, back, expected):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.workout(days_ago(1), bench, [(chest, 1)])
        builder.workout(days_ago(2), row, [(back, 1)])

        factors = detect_imbalances(builder.build())

        assert [f.severity for f in factors] == expected

    def test_points_at_stronger_part(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.workout(days_ago(1), bench, [(100, 10)])
        builder.workout(days_ago(2), row, [(50, 10)])

        factor = detect_imbalances(builder.build())[0]

        assert factor.body_part == "chest"
        assert factor.value == 100
        assert "back" in factor.recommendation

    def test_pair_with_untrained_side_skipped(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        builder.workout(days_ago(1), bench, [(100, 10)])
        assert detect_imbalances(builder.build()) == []

    def test_unilateral_imbalance_included(self):
        builder = TrainingBuilder()
        lunge = builder.exercise("Lunge", "quads", unilateral=True)
        builder.workout(days_ago(1), lunge, [(20, 10, "left"), (10, 10, "right")])

        factors = detect_imbalances(builder.build())

        assert len(factors) == 1
        assert factors[0].type == IMBALANCE
        assert factors[0].severity == "high"
        assert factors[0].body_part == "quads"
        assert "right side" in factors[0].recommendation

    def test_low_unilateral_imbalance_ignored(self):
        builder = TrainingBuilder()
        lunge = builder.exercise("Lunge", "quads", unilateral=True)
        builder.workout(days_ago(1), lunge, [(21, 10, "left"), (19, 10, "right")])
        assert detect_imbalances(builder.build()) == []


# ======================================================================
# detect_overtraining
# ======================================================================


class TestDetectOvertraining:
    @pytest.mark.parametrize(
        "sessions, expected",
        [
            (5, []),
            (6, ["moderate"]),
            (7, ["high"]),
        ],
    )
    def test_frequency(self, sessions, expected):
        builder = TrainingBuilder()
        for d in range(sessions):
            builder.session(days_ago(d, hour=6))
        data = builder.build()

        factors = detect_overtraining(data, AS_OF, weekly_volumes(data))

        assert [f.severity for f in factors] == expected
        assert all(f.type == OVERTRAINING for f in factors)

    def test_no_deload_over_long_block(self):
        builder = _make_weekly([1000] * 6)
        data = builder.build()

        factors = detect_overtraining(data, AS_OF, weekly_volumes(data))

        assert len(factors) == 1
        assert factors[0].severity == "moderate"
        assert factors[0].value == 6

    def test_deload_week_clears_factor(self):
        builder = _make_weekly([1000, 1000, 1000, 700, 1000, 1000])
        data = builder.build()
        assert detect_overtraining(data, AS_OF, weekly_volumes(data)) == []

    def test_week_off_counts_as_deload(self):
        assert detect_overtraining(TrainingBuilder().build(), AS_OF, [1000, 1000, 0, 1000, 1000, 1000]) == []

    def test_short_block_not_flagged(self):
        builder = _make_weekly([1000] * 5)
        data = builder.build()
        assert detect_overtraining(data, AS_OF, weekly_volumes(data)) == []

    def test_strength_dropping_while_volume_holds(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        squat = builder.exercise("Squat", "quads")
        for exercise, weight in ((bench, 100), (squat, 140)):
            builder.workout(days_ago(20), exercise, [(weight, 5)])
            builder.workout(days_ago(5), exercise, [(weight * 0.9, 5), (weight * 0.9, 5)])

        factors = detect_overtraining(builder.build(), AS_OF, [])

        assert len(factors) == 1
        assert factors[0].severity == "high"
        assert factors[0].value == 100

    def test_strength_drop_with_lower_volume_not_flagged(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        squat = builder.exercise("Squat", "quads")
        for exercise, weight in ((bench, 100), (squat, 140)):
            builder.workout(days_ago(20), exercise, [(weight, 5), (weight, 5)])
            builder.workout(days_ago(5), exercise, [(weight * 0.9, 5)])

        assert detect_overtraining(builder.build(), AS_OF, []) == []

    def test_single_exercise_not_enough(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        builder.workout(days_ago(20), bench, [(100, 5)])
        builder.workout(days_ago(5), bench, [(80, 5), (80, 5)])

        assert detect_overtraining(builder.build(), AS_OF, []) == []


# ======================================================================
# detect_neglected_stabilizers
# ======================================================================


class TestDetectNeglectedStabilizers:
    def test_all_missing(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        builder.workout(days_ago(1), bench, [(100, 10)])

        factors = detect_neglected_stabilizers(builder.build())

        assert len(factors) == len(STABILIZER_BODY_PARTS)
        assert {f.severity for f in factors} == {"moderate"}
        assert {f.type for f in factors} == {NEGLECTED_STABILIZER}

    def test_low_share_is_low_severity(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        crunch = builder.exercise("Weighted Crunch", "core")
        builder.workout(days_ago(1), bench, [(100, 100)])
        builder.workout(days_ago(2), crunch, [(10, 10)])

        core = [f for f in detect_neglected_stabilizers(builder.build()) if f.body_part == "core"]

        assert len(core) == 1
        assert core[0].severity == "low"
        assert core[0].value == pytest.approx(0.99, abs=0.01)

    def test_enough_share_not_flagged(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        crunch = builder.exercise("Weighted Crunch", "core")
        builder.workout(days_ago(1), bench, [(100, 10)])
        builder.workout(days_ago(2), crunch, [(10, 10)])

        parts = {f.body_part for f in detect_neglected_stabilizers(builder.build())}

        assert "core" not in parts


# ======================================================================
# Scoring
# ======================================================================


class TestRiskScore:
    @pytest.mark.parametrize(
        "severities, expected",
        [
            ([], 0),
            (["low"], 5),
            (["moderate"], 15),
            (["high"], 25),
            (["high", "moderate", "low"], 45),
            (["high"] * 5, 100),
        ],
    )
    def test_points(self, severities, expected):
        assert calculate_risk_score([_make_factor(s) for s in severities]) == expected

    def test_adding_factor_never_lowers_score(self):
        factors = []
        previous = 0
        for severity in ["low", "high", "moderate", "high", "high", "high", "low"]:
            factors.append(_make_factor(severity))
            score = calculate_risk_score(factors)
            assert previous <= score <= 100
            previous = score

    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, "low"),
            (29, "low"),
            (30, "moderate"),
            (59, "moderate"),
            (60, "high"),
            (100, "high"),
        ],
    )
    def test_overall_label(self, score, expected):
        assert label_overall_risk(score) == expected

    def test_default_points(self):
        assert DEFAULT_CONFIG.severity_points == {"high": 25, "moderate": 15, "low": 5}


# ======================================================================
# summarize_injury_risk
# ======================================================================


class TestSummarizeInjuryRisk:
    def test_no_sessions(self):
        summary = summarize_injury_risk(TrainingBuilder().build(), AS_OF)
        assert summary == InjuryRiskSummary()
        assert summary.overall_risk == "low"
        assert summary.risk_score == 0

    def test_factor_lists_partition_all_factors(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.workout(days_ago(8), bench, [(100, 10)])
        builder.workout(days_ago(1), bench, [(100, 20)])
        builder.workout(days_ago(2), row, [(50, 10)])

        summary = summarize_injury_risk(builder.build(), AS_OF)

        grouped = (summary.volume_spikes + summary.imbalances + summary.overtraining_indicators +
                   summary.neglected_stabilizers)
        assert len(grouped) == len(summary.factors)
        assert summary.volume_spikes and summary.imbalances and summary.neglected_stabilizers
        assert summary.risk_score == calculate_risk_score(summary.factors)
        assert summary.overall_risk == label_overall_risk(summary.risk_score)
