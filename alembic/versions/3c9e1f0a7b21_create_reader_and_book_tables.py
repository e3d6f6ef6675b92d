"""Create reader and book tables

Revision ID: 3c9e1f0a7b21
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e1f0a7b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('reader',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment="Reader's full name"),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('book',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('author', sa.String(length=255), nullable=False, comment="Author's full name"),
        sa.Column('reader_id', sa.Integer(), nullable=True, comment='Reader currently holding the book, NULL if in library'),
        sa.ForeignKeyConstraint(['reader_id'], ['reader.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_book_reader_id'), 'book', ['reader_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_book_reader_id'), table_name='book')
    op.drop_table('book')
    op.drop_table('reader')
