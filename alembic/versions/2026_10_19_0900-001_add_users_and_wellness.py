"""Add users and wellness_entries tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and wellness_entries tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False, server_default='player'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table('wellness_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('sleep_quality', sa.Integer(), nullable=True),
        sa.Column('muscle_soreness', sa.Integer(), nullable=True),
        sa.Column('fatigue_level', sa.Integer(), nullable=True),
        sa.Column('stress_level', sa.Integer(), nullable=True),
        sa.Column('mood', sa.Integer(), nullable=True),
        sa.Column('nutrition_adherence', sa.Integer(), nullable=True),
        sa.Column('sleep_hours', sa.Float(), nullable=True),
        sa.Column('session_rpe', sa.Integer(), nullable=True),
        sa.Column('soreness_areas', sa.JSON(), nullable=False),
        sa.Column('readiness_score', sa.Float(), nullable=False),
        sa.Column('readiness_status', sqlmodel.sql.sqltypes.AutoString(length=8), nullable=False),
        sa.Column('entry_method', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False,
                  server_default='player_input'),
        sa.Column('submitted_by', sa.Integer(), nullable=True),
        sa.Column('staff_review', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False,
                  server_default='pending'),
        sa.Column('staff_notes', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('reviewed_by', sa.Integer(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['player_id'], ['users.id']),
        sa.ForeignKeyConstraint(['submitted_by'], ['users.id']),
        sa.ForeignKeyConstraint(['reviewed_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('player_id', 'date', name='uq_wellness_player_date'))
    op.create_index(op.f('ix_wellness_entries_player_id'), 'wellness_entries', ['player_id'], unique=False)
    op.create_index(op.f('ix_wellness_entries_date'), 'wellness_entries', ['date'], unique=False)


def downgrade() -> None:
    """Drop wellness_entries and users tables."""
    op.drop_index(op.f('ix_wellness_entries_date'), table_name='wellness_entries')
    op.drop_index(op.f('ix_wellness_entries_player_id'), table_name='wellness_entries')
    op.drop_table('wellness_entries')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
