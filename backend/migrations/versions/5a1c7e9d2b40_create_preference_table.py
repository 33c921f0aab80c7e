"""create preference table for the persisted high score

Revision ID: 5a1c7e9d2b40
Revises:
Create Date: 2026-10-17 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a1c7e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'preference',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('namespace', sa.String(length=64), nullable=False),
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('namespace', 'key', name='uq_preference_namespace_key'),
    )
    with op.batch_alter_table('preference') as batch_op:
        batch_op.create_index(batch_op.f('ix_preference_namespace'), ['namespace'], unique=False)


def downgrade():
    with op.batch_alter_table('preference') as batch_op:
        batch_op.drop_index(batch_op.f('ix_preference_namespace'))
    op.drop_table('preference')
