"""create solicitations and comments tables

Revision ID: 003_solicitations_comments
Revises: 002_students_employees
Create Date: 2026-10-06
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '003_solicitations_comments'
down_revision: Union[str, None] = '002_students_employees'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- solicitations ---
    op.create_table(
        'solicitations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('solicitation_date', sa.Date(), nullable=False),
        sa.Column('estimated_completion_date', sa.Date(), nullable=False),
        sa.Column('conclusion_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(20), server_default=sa.text("'Criada'"), nullable=False),
        sa.Column('priority', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('document_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['document_id'], ['documents.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de solicitações de documentos'
    )
    op.create_index('idx_solicitation_status', 'solicitations', ['status'])
    op.create_index('idx_solicitation_student', 'solicitations', ['student_id'])

    # --- comments ---
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('comment_date', sa.Date(), nullable=False),
        sa.Column('employee_name', sa.String(200), nullable=False),
        sa.Column('solicitation_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['solicitation_id'], ['solicitations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de comentários sobre solicitações'
    )
    op.create_index('idx_comment_solicitation', 'comments', ['solicitation_id'])


def downgrade() -> None:
    op.drop_index('idx_comment_solicitation', table_name='comments')
    op.drop_table('comments')
    op.drop_index('idx_solicitation_student', table_name='solicitations')
    op.drop_index('idx_solicitation_status', table_name='solicitations')
    op.drop_table('solicitations')
