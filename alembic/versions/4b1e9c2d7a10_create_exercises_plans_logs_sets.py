"""create exercises, plans, plan exercises, logs, sets

Revision ID: 4b1e9c2d7a10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c2d7a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) exercises catalog
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True),
        sa.Column('instructions', sa.Text(), nullable=False),
        sa.Column('gif_url', sa.String(length=500), nullable=True),
        sa.Column('uses_weight', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 2) workout_plans
    op.create_table(
        'workout_plans',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 3) plan <-> exercise links, both sides cascade
    op.create_table(
        'workout_plan_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_plan_id', sa.Integer(), sa.ForeignKey('workout_plans.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('target_sets', sa.Integer(), nullable=True),
        sa.Column('target_reps', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('superset_group', sa.Integer(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) workout_logs; plan reference is cleared, not cascaded
    op.create_table(
        'workout_logs',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('workout_plan_id', sa.Integer(), sa.ForeignKey('workout_plans.id', ondelete='SET NULL'), nullable=True, index=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('performed_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 5) workout_sets
    op.create_table(
        'workout_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_log_id', sa.Integer(), sa.ForeignKey('workout_logs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(10, 2), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    # drop child tables first
    op.drop_table('workout_sets')
    op.drop_table('workout_logs')
    op.drop_table('workout_plan_exercises')
    op.drop_table('workout_plans')
    op.drop_table('exercises')
