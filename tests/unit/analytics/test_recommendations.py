"""
Unit tests for body-part exercise recommendations.
"""

import pytest

from app.analytics.recommendations import (NEVER_TRAINED_DAYS, RecommendationConfig, _priority,
                                           build_recommendations, )
from builders import AS_OF, TrainingBuilder, days_ago

CFG = RecommendationConfig()


class TestPriority:
    @pytest.mark.parametrize(
        "days, deficit, expected",
        [
            (NEVER_TRAINED_DAYS, 100.0, "high"),
            (22, 0.0, "high"),
            (3, 41.0, "high"),
            (15, 0.0, "moderate"),
            (3, 21.0, "moderate"),
            (8, 0.0, "low"),
            (21, 40.0, "moderate"),
        ],
    )
    def test_levels(self, days, deficit, expected):
        priority, _ = _priority(days, deficit, CFG)
        assert priority == expected

    def test_never_trained_reason(self):
        _, reason = _priority(NEVER_TRAINED_DAYS, 100.0, CFG)
        assert reason == "Not trained this month"


class TestBuildRecommendations:
    def test_empty_catalogue(self):
        assert build_recommendations(TrainingBuilder().build(), AS_OF) == []

    def test_catalogue_without_sessions(self):
        """Every catalogued body part is a never-trained candidate."""
        builder = TrainingBuilder()
        builder.exercise("Bench Press", "chest")
        builder.exercise("Squat", "quads")

        recommendations = build_recommendations(builder.build(), AS_OF)

        assert {r.body_part for r in recommendations} == {"chest", "quads"}
        for r in recommendations:
            assert r.days_since_last_training == NEVER_TRAINED_DAYS
            assert r.priority == "high"
            assert r.volume_deficit == 0

    def test_recently_trained_balanced_part_not_recommended(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.workout(days_ago(1), bench, [(100, 10)])
        builder.workout(days_ago(2), row, [(100, 10)])

        assert build_recommendations(builder.build(), AS_OF) == []

    def test_stale_part_recommended_with_exercises(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.exercise("Pull-up", "back")
        builder.workout(days_ago(1), bench, [(100, 10)])
        builder.workout(days_ago(16), row, [(100, 10)])

        recommendations = build_recommendations(builder.build(), AS_OF)

        assert len(recommendations) == 1
        back = recommendations[0]
        assert back.body_part == "back"
        assert back.body_part_label == "Back"
        assert back.priority == "moderate"
        assert back.days_since_last_training == 16
        assert [e.name for e in back.exercises] == ["Row", "Pull-up"]

    def test_volume_deficit_against_mean(self):
        builder = TrainingBuilder()
        bench = builder.exercise("Bench Press", "chest")
        row = builder.exercise("Row", "back")
        builder.workout(days_ago(1), bench, [(300, 10)])
        builder.workout(days_ago(1), row, [(100, 10)])

        recommendations = build_recommendations(builder.build(), AS_OF)

        # mean 2000, back 1000 → 50% deficit
        assert len(recommendations) == 1
        assert recommendations[0].body_part == "back"
        assert recommendations[0].volume_deficit == 50
        assert recommendations[0].priority == "high"

    def test_sorted_by_priority_then_days(self):
        builder = TrainingBuilder()
        parts = [("Curl", "biceps", 9), ("Row", "back", 16), ("Squat", "quads", 25), ("Calf Raise", "calves", 10)]
        for name, part, days in parts:
            builder.workout(days_ago(days), builder.exercise(name, part), [(100, 10)])

        recommendations = build_recommendations(builder.build(), AS_OF)

        assert [r.body_part for r in recommendations] == ["quads", "back", "calves", "biceps"]

    def test_limited_to_five(self):
        builder = TrainingBuilder()
        for part in ("chest", "back", "quads", "hamstrings", "glutes", "biceps", "triceps"):
            builder.exercise(part.title(), part)

        assert len(build_recommendations(builder.build(), AS_OF)) == 5
