"""coaching schema: users, profiles, exercises, logs, programs, achievements

Revision ID: 4b1e0c7a9d21
Revises:
Create Date: 2026-10-19 10:12:03.514208

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum type once so we can create/drop it explicitly
user_role = sa.Enum('client', 'coach', 'admin', name='user_role')


# revision identifiers, used by Alembic.
revision: str = '4b1e0c7a9d21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('role', user_role, nullable=False, server_default='client'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) client_profiles (one per user)
    op.create_table(
        'client_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('gender', sa.String(length=32), nullable=True),
        sa.Column('experience_level', sa.String(length=32), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('weight_unit', sa.String(length=8), nullable=False, server_default='kg'),
        sa.Column('preferred_days', sa.JSON(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_client_profiles_user_id', 'client_profiles', ['user_id'], unique=True)

    # 3) exercises
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False, unique=True),
        sa.Column('movement_pattern', sa.String(length=32), nullable=True),
        sa.Column('muscle_group', sa.String(length=120), nullable=True),
        sa.Column('is_compound', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_bodyweight', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )

    # 4) exercise_logs + set_logs
    op.create_table(
        'exercise_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sets_completed', sa.Integer(), nullable=True),
        sa.Column('reps_completed', sa.String(length=50), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('rpe', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_pr', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('pr_type', sa.String(length=32), nullable=True),
    )
    op.create_index('ix_exercise_logs_user_id', 'exercise_logs', ['user_id'])
    op.create_index('ix_exercise_logs_exercise_id', 'exercise_logs', ['exercise_id'])
    op.create_index('ix_exercise_logs_completed_at', 'exercise_logs', ['completed_at'])

    op.create_table(
        'set_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('log_id', sa.Integer(), sa.ForeignKey('exercise_logs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('rpe', sa.Float(), nullable=True),
        sa.UniqueConstraint('log_id', 'set_number', name='uq_set_logs_log_set'),
    )
    op.create_index('ix_set_logs_log_id', 'set_logs', ['log_id'])

    # 5) programs, their slots and slot prescriptions
    op.create_table(
        'programs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('split_style', sa.String(length=32), nullable=False),
        sa.Column('periodization', sa.String(length=32), nullable=False),
        sa.Column('duration_weeks', sa.Integer(), nullable=False),
        sa.Column('sessions_per_week', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_table(
        'program_slots',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('program_id', sa.Integer(), sa.ForeignKey('programs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('slot_id', sa.String(length=16), nullable=False),
        sa.Column('week_number', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('phase', sa.String(length=40), nullable=False),
        sa.Column('intensity_modifier', sa.String(length=40), nullable=False),
        sa.Column('label', sa.String(length=80), nullable=False),
        sa.Column('focus', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('program_id', 'slot_id', name='uq_program_slots_program_slot'),
    )
    op.create_index('ix_program_slots_program_id', 'program_slots', ['program_id'])
    op.create_table(
        'program_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('program_id', sa.Integer(), sa.ForeignKey('programs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('slot_id', sa.String(length=16), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.String(length=50), nullable=True),
        sa.Column('intensity_pct', sa.Float(), nullable=True),
        sa.Column('rpe_target', sa.Integer(), nullable=True),
    )
    op.create_index('ix_program_exercises_program_id', 'program_exercises', ['program_id'])
    op.create_index('ix_program_exercises_exercise_id', 'program_exercises', ['exercise_id'])

    # 6) achievements
    op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('achievement_type', sa.String(length=16), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='SET NULL'), nullable=True),
        sa.Column('metric_value', sa.Float(), nullable=True),
        sa.Column('celebrated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('earned_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_achievements_user_id', 'achievements', ['user_id'])
    op.create_index('ix_achievements_achievement_type', 'achievements', ['achievement_type'])


def downgrade() -> None:
    op.drop_table('achievements')
    op.drop_table('program_exercises')
    op.drop_table('program_slots')
    op.drop_table('programs')
    op.drop_table('set_logs')
    op.drop_table('exercise_logs')
    op.drop_table('exercises')
    op.drop_table('client_profiles')
    op.drop_table('users')
    user_role.drop(op.get_bind(), checkfirst=True)
