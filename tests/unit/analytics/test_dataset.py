"""
Unit tests for TrainingData joins: rows that do not resolve contribute nothing.
"""

import datetime

from app.analytics.dataset import TrainingData
from app.analytics.general import summarize_general_stats
from app.analytics.strength import summarize_strength_stats
from app.analytics.symmetry import summarize_symmetry
from app.models.workout import ExerciseLog, SetLog
from builders import AS_OF, TrainingBuilder, days_ago


def _with_dangling_rows() -> TrainingData:
    """One balanced lunge workout plus rows whose joins are broken."""
    builder = TrainingBuilder()
    lunge = builder.exercise("Lunge", "quads", "legs", unilateral=True)
    curl = builder.exercise("Curl", "biceps", "upper")
    builder.workout(days_ago(1), lunge, [(20, 10, "left"), (20, 10, "right")])

    # log on a session that is still open
    open_session = builder.session(days_ago(0), minutes=None)
    builder.add_set(builder.log(open_session, curl), 30, 10)

    # log whose exercise is missing
    unknown_exercise = ExerciseLog(id=50, workout_session_id=1, exercise_id=99, order_index=5)
    builder.logs.append(unknown_exercise)
    builder.add_set(unknown_exercise, 100, 10)

    # log whose session is missing
    unknown_session = ExerciseLog(id=51, workout_session_id=99, exercise_id=lunge.id, order_index=0)
    builder.logs.append(unknown_session)
    builder.add_set(unknown_session, 40, 10, side="left")

    # set whose exercise log is missing
    builder.sets.append(SetLog(id=90, exercise_log_id=999, set_number=1, reps=10, weight=500, side="left",
                               completed=True))
    return builder.build()


class TestDanglingRows:
    def test_only_resolved_sets_are_joined(self):
        data = _with_dangling_rows()

        records = list(data.iter_sets())

        assert [r.set_log.side for r in records] == ["left", "right"]
        assert all(r.exercise.name == "Lunge" for r in records)

    def test_no_volume_contribution(self):
        data = _with_dangling_rows()

        assert data.total_volume() == 400
        assert data.volume_by_body_part() == {"quads": 400}

    def test_no_last_trained_contribution(self):
        data = _with_dangling_rows()
        assert data.last_trained_by_body_part() == {"quads": days_ago(1)}

    def test_logs_without_exercise_or_completed_session_skipped(self):
        data = _with_dangling_rows()
        assert [log.id for log in data.completed_logs()] == [1]

    def test_records_and_symmetry_unaffected(self):
        data = _with_dangling_rows()

        strength = summarize_strength_stats(data, AS_OF)
        symmetry = summarize_symmetry(data)

        assert [r.exercise_name for r in strength.personal_records] == ["Lunge"]
        assert strength.personal_records[0].max_weight == 20
        assert symmetry.total_unilateral_exercises == 1
        assert symmetry.worst_imbalance.imbalance_percentage == 0
        assert symmetry.worst_imbalance.left_sets_count == 1

    def test_general_counts_only_resolved_rows(self):
        stats = summarize_general_stats(_with_dangling_rows(), AS_OF)

        assert stats.total_workouts == 1
        assert stats.total_exercises == 1


class TestUntil:
    def test_drops_later_sessions(self):
        builder = TrainingBuilder()
        squat = builder.exercise("Squat", "quads")
        builder.workout(days_ago(1), squat, [(100, 5)])
        builder.workout(AS_OF + datetime.timedelta(hours=1), squat, [(200, 5)])

        data = builder.build().until(AS_OF)

        assert len(data.sessions) == 1
        assert data.total_volume() == 500

    def test_nothing_later_returns_same_view(self):
        builder = TrainingBuilder()
        builder.session(days_ago(1))
        data = builder.build()

        assert data.until(AS_OF) is data

    def test_is_empty_ignores_open_sessions(self):
        builder = TrainingBuilder()
        builder.session(days_ago(0), minutes=None)
        assert builder.build().is_empty

        builder.session(days_ago(1))
        assert not builder.build().is_empty
