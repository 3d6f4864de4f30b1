"""Add exercise, workout logging and goal tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-12 10:15:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)'))


def upgrade() -> None:
    """Create exercises, workout_sessions, exercise_logs, set_logs and body_part_goals."""
    op.create_table('exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('target_body_part', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('is_unilateral', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        _timestamp('created_at'), _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_user_id'), 'exercises', ['user_id'])
    op.create_index(op.f('ix_exercises_target_body_part'), 'exercises', ['target_body_part'])

    op.create_table('workout_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('workout_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('started_at', sa.DateTime(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.CheckConstraint('completed_at IS NULL OR completed_at >= started_at', name='ck_workout_sessions_completion'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_sessions_user_id'), 'workout_sessions', ['user_id'])
    op.create_index(op.f('ix_workout_sessions_started_at'), 'workout_sessions', ['started_at'])
    op.create_index(op.f('ix_workout_sessions_completed_at'), 'workout_sessions', ['completed_at'])

    op.create_table('exercise_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_session_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['workout_session_id'], ['workout_sessions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercise_logs_workout_session_id'), 'exercise_logs', ['workout_session_id'])
    op.create_index(op.f('ix_exercise_logs_exercise_id'), 'exercise_logs', ['exercise_id'])

    op.create_table('set_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('exercise_log_id', sa.Integer(), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('reps', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('rir', sa.Integer(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('side', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['exercise_log_id'], ['exercise_logs.id'], ondelete='CASCADE'),
        sa.CheckConstraint('reps >= 0', name='ck_set_logs_reps'),
        sa.CheckConstraint("side IS NULL OR side IN ('left', 'right')", name='ck_set_logs_side'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_set_logs_exercise_log_id'), 'set_logs', ['exercise_log_id'])

    op.create_table('body_part_goals', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('body_part', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('goal_type', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('timeframe', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False,
                  server_default='weekly'),
        sa.Column('target_value', sa.Float(), nullable=True),
        sa.Column('target_exercises', sa.JSON(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        _timestamp('created_at'), _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_body_part_goals_user_id'), 'body_part_goals', ['user_id'])


def downgrade() -> None:
    """Drop the training tables, children first."""
    op.drop_index(op.f('ix_body_part_goals_user_id'), table_name='body_part_goals')
    op.drop_table('body_part_goals')
    op.drop_index(op.f('ix_set_logs_exercise_log_id'), table_name='set_logs')
    op.drop_table('set_logs')
    op.drop_index(op.f('ix_exercise_logs_exercise_id'), table_name='exercise_logs')
    op.drop_index(op.f('ix_exercise_logs_workout_session_id'), table_name='exercise_logs')
    op.drop_table('exercise_logs')
    op.drop_index(op.f('ix_workout_sessions_completed_at'), table_name='workout_sessions')
    op.drop_index(op.f('ix_workout_sessions_started_at'), table_name='workout_sessions')
    op.drop_index(op.f('ix_workout_sessions_user_id'), table_name='workout_sessions')
    op.drop_table('workout_sessions')
    op.drop_index(op.f('ix_exercises_target_body_part'), table_name='exercises')
    op.drop_index(op.f('ix_exercises_user_id'), table_name='exercises')
    op.drop_table('exercises')
