"""create documents table

Revision ID: 001_create_documents
Revises:
Create Date: 2026-10-05
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_documents'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('attendance_deadline', sa.Integer(), nullable=False, comment='Prazo de atendimento em dias'),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de documentos disponíveis para solicitação'
    )


def downgrade() -> None:
    op.drop_table('documents')
