"""Create the storage_entries key-value table

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2025-11-04 09:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """One row per persisted collection, holding its JSON array."""
    op.create_table(
        'storage_entries',
        sa.Column('key', sa.String(), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('key'),
    )
    op.create_index(op.f('ix_storage_entries_key'), 'storage_entries', ['key'], unique=False)


def downgrade() -> None:
    """Drop the key-value table."""
    op.drop_index(op.f('ix_storage_entries_key'), table_name='storage_entries')
    op.drop_table('storage_entries')
