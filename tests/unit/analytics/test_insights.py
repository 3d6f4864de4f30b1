"""
Unit tests for dashboard insight cards.
"""

import pytest

from app.analytics.insights import InsightsConfig, summarize_insights
from builders import AS_OF, TrainingBuilder, days_ago


# ======================================================================
# Helpers
# ======================================================================


def _make_chest_back(chest_volume: float, back_volume: float, back_days: int = 2) -> TrainingBuilder:
    builder = TrainingBuilder()
    bench = builder.exercise("Bench Press", "chest")
    row = builder.exercise("Barbell Row", "back")
    builder.workout(days_ago(1), bench, [(chest_volume / 10, 10)])
    builder.workout(days_ago(back_days), row, [(back_volume / 10, 10)])
    return builder


def _cards(builder: TrainingBuilder, config=None) -> dict:
    return {card.type: card for card in summarize_insights(builder.build(), AS_OF, config)}


# ======================================================================
# summarize_insights
# ======================================================================


class TestSummarizeInsights:
    def test_no_logs(self):
        assert summarize_insights(TrainingBuilder().build(), AS_OF) == []

    def test_card_order(self):
        cards = summarize_insights(_make_chest_back(1500, 1000, back_days=20).build(), AS_OF)
        assert [c.type for c in cards] == ["imbalance", "undertrained", "pr", "performing"]


class TestImbalanceCard:
    @pytest.mark.parametrize(
        "chest, back, expected",
        [
            (1200, 1000, None),
            (1250, 1000, None),
            (1300, 1000, "low"),
            (1400, 1000, "moderate"),
            (1500, 1000, "moderate"),
            (1600, 1000, "high"),
        ],
    )
    def test_severity(self, chest, back, expected):
        card = _cards(_make_chest_back(chest, back)).get("imbalance")
        assert (card.severity if card else None) == expected

    def test_points_at_weaker_part(self):
        card = _cards(_make_chest_back(1500, 1000))["imbalance"]
        assert card.body_part == "back"
        assert card.value == "50%"
        assert card.description == "Chest gets 50% more volume"

    def test_picks_largest_ratio(self):
        builder = _make_chest_back(1300, 1000)
        curl = builder.exercise("Curl", "biceps")
        pushdown = builder.exercise("Pushdown", "triceps")
        builder.workout(days_ago(1), curl, [(30, 10)])
        builder.workout(days_ago(1), pushdown, [(10, 10)])

        card = _cards(builder)["imbalance"]

        assert card.body_part == "triceps"
        assert card.severity == "high"


class TestUndertrainedCard:
    @pytest.mark.parametrize(
        "days, expected",
        [
            (7, None),
            (8, "low"),
            (15, "moderate"),
            (29, "moderate"),
        ],
    )
    def test_severity(self, days, expected):
        card = _cards(_make_chest_back(1000, 1000, back_days=days)).get("undertrained")
        assert (card.severity if card else None) == expected

    def test_high_severity_with_wider_window(self):
        cfg = InsightsConfig(neglected_high_days=20)
        card = _cards(_make_chest_back(1000, 1000, back_days=25), cfg)["undertrained"]
        assert card.severity == "high"
        assert card.value == "25d"
        assert card.body_part == "back"


class TestPerformanceCards:
    def test_heaviest_set(self):
        builder = _make_chest_back(1000, 1000)
        squat = builder.exercise("Squat", "quads")
        builder.workout(days_ago(3), squat, [(142.5, 3)])

        card = _cards(builder)["pr"]

        assert card.description == "Squat"
        assert card.value == "142.5kg"
        assert card.body_part == "quads"
        assert card.severity == "positive"

    def test_heaviest_set_tie_prefers_latest(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        incline = builder.exercise("Incline Press", "chest")
        builder.workout(days_ago(5), bench, [(100, 5)])
        builder.workout(days_ago(2), incline, [(100, 3)])

        assert _cards(builder)["pr"].description == "Incline Press"

    def test_top_volume(self):
        card = _cards(_make_chest_back(1500, 1000))["performing"]
        assert card.body_part == "chest"
        assert card.value == "1.5k kg"

    def test_untagged_exercises_give_no_body_part_cards(self):
        builder = TrainingBuilder()
        mystery = builder.exercise("Mystery Lift")
        builder.workout(days_ago(1), mystery, [(100, 5)])

        assert summarize_insights(builder.build(), AS_OF) == []
