"""create_budget_tables

Creates the projects, subbudgets and positions tables. Foreign keys use
ON DELETE CASCADE so deleting a project removes its sub-budgets and their
positions.

Revision ID: 3c9a1e5f7b21
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c9a1e5f7b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('total_budget', sa.Float(), nullable=False),
    )

    op.create_table(
        'subbudgets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'project_id',
            sa.Integer(),
            sa.ForeignKey('projects.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('budget', sa.Float(), nullable=False),
        sa.Column('threshold', sa.Float(), nullable=False, server_default='0.9'),
    )
    op.create_index('ix_subbudgets_project_id', 'subbudgets', ['project_id'])

    op.create_table(
        'positions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'subbudget_id',
            sa.Integer(),
            sa.ForeignKey('subbudgets.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('planned', sa.Float(), nullable=False),
        sa.Column('actual', sa.Float(), nullable=False, server_default='0'),
        sa.Column('done', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_positions_subbudget_id', 'positions', ['subbudget_id'])


def downgrade() -> None:
    op.drop_index('ix_positions_subbudget_id', table_name='positions')
    op.drop_table('positions')
    op.drop_index('ix_subbudgets_project_id', table_name='subbudgets')
    op.drop_table('subbudgets')
    op.drop_table('projects')
