"""
Unit tests for the full body-part analysis.
"""

import datetime

import pytest

from app.analytics.body_parts import summarize_body_parts
from app.schemas.body_parts import BodyPartAnalysis
from builders import AS_OF, TrainingBuilder, days_ago


# ======================================================================
# Helpers
# ======================================================================


def _make_history(*rows: tuple) -> TrainingBuilder:
    """rows: (exercise name, body part, days ago, volume)"""
    builder = TrainingBuilder()
    exercises = {}
    for name, part, days, volume in rows:
        if name not in exercises:
            exercises[name] = builder.exercise(name, part)
        builder.workout(days_ago(days), exercises[name], [(volume / 10, 10)])
    return builder


def _analyse(*rows: tuple) -> BodyPartAnalysis:
    return summarize_body_parts(_make_history(*rows).build(), AS_OF)


# ======================================================================
# Distribution / imbalances
# ======================================================================


class TestDistribution:
    def test_empty(self):
        assert summarize_body_parts(TrainingBuilder().build(), AS_OF) == BodyPartAnalysis()

    def test_sorted_with_percentages(self):
        analysis = _analyse(("Bench Press", "chest", 1, 600), ("Row", "back", 2, 300), ("Curl", "biceps", 3, 100))

        assert [(d.body_part, d.percentage) for d in analysis.volume_distribution] == [
            ("chest", 60.0),
            ("back", 30.0),
            ("biceps", 10.0),
        ]


class TestImbalances:
    @pytest.mark.parametrize(
        "chest, back, imbalanced",
        [
            (1000, 1000, False),
            (1000, 810, False),
            (1000, 790, True),
            (500, 1000, True),
        ],
    )
    def test_threshold(self, chest, back, imbalanced):
        analysis = _analyse(("Bench Press", "chest", 1, chest), ("Row", "back", 2, back))

        pair = analysis.imbalances[0]

        assert pair.label == "Chest vs Back"
        assert pair.is_imbalanced is imbalanced

    def test_difference_relative_to_larger(self):
        pair = _analyse(("Bench Press", "chest", 1, 500), ("Row", "back", 2, 1000)).imbalances[0]
        assert pair.difference == 50
        assert (pair.part1, pair.part2) == ("chest", "back")
        assert (pair.volume1, pair.volume2) == (500, 1000)

    def test_only_pairs_with_both_parts(self):
        analysis = _analyse(("Bench Press", "chest", 1, 500), ("Squat", "quads", 2, 1000))
        assert analysis.imbalances == []


# ======================================================================
# Undertrained
# ======================================================================


class TestUndertrained:
    @pytest.mark.parametrize(
        "days, expected",
        [
            (14, None),
            (15, "warning"),
            (30, "warning"),
            (31, "critical"),
        ],
    )
    def test_severity(self, days, expected):
        analysis = _analyse(("Bench Press", "chest", 1, 1000), ("Squat", "quads", days, 1000))
        quads = [u for u in analysis.undertrained_parts if u.body_part == "quads"]
        assert (quads[0].severity if quads else None) == expected

    def test_sessions_this_month(self):
        analysis = _analyse(("Squat", "quads", 16, 1000), ("Squat", "quads", 20, 1000), ("Squat", "quads", 45, 1000))
        quads = analysis.undertrained_parts[0]
        assert quads.days_since_last_trained == 16
        assert quads.times_this_month == 2

    def test_longest_first(self):
        analysis = _analyse(("Squat", "quads", 20, 1000), ("Curl", "biceps", 40, 1000))
        assert [u.body_part for u in analysis.undertrained_parts] == ["biceps", "quads"]


# ======================================================================
# Recommendations
# ======================================================================


class TestRecommendations:
    def test_balanced_and_regular(self):
        analysis = _analyse(("Bench Press", "chest", 1, 1000), ("Row", "back", 2, 900))
        assert analysis.recommendations == [
            "Great work! Your training is well balanced",
            "Excellent frequency: every body part is trained regularly",
        ]

    def test_problems_reported(self):
        analysis = _analyse(
            ("Bench Press", "chest", 1, 1000),
            ("Row", "back", 2, 500),
            ("Squat", "quads", 40, 1000),
            ("Calf Raise", "calves", 3, 20),
        )

        assert analysis.recommendations == [
            "Train Back more: significant imbalance detected (50%)",
            "Quadriceps: not trained for 40 days",
            "Consider more volume for: Calves",
        ]


# ======================================================================
# Progress history
# ======================================================================


class TestProgressHistory:
    def test_twelve_monday_weeks(self):
        analysis = _analyse(("Bench Press", "chest", 1, 1000), ("Bench Press", "chest", 8, 800))

        history = analysis.progress_history[0]
        weeks = [w.week for w in history.weekly_data]

        assert history.body_part == "chest"
        assert len(weeks) == 12
        assert all(w.weekday() == 0 for w in weeks)
        assert weeks[-1] == datetime.date(2026, 3, 16)
        assert [w.volume for w in history.weekly_data[-2:]] == [800, 1000]
        assert sum(w.volume for w in history.weekly_data) == 1800

    def test_old_volume_outside_history(self):
        analysis = _analyse(("Bench Press", "chest", 1, 1000), ("Squat", "quads", 200, 1000))
        assert [h.body_part for h in analysis.progress_history] == ["chest"]
