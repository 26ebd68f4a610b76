"""
Model SQLAlchemy para comentários de funcionários sobre solicitações
"""
from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, Index
from sqlalchemy.orm import relationship
from datetime import date

from ..database import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)

    description = Column(
        Text,
        nullable=False,
        comment="Conteúdo do comentário"
    )

    comment_date = Column(
        Date,
        nullable=False,
        default=date.today,
        comment="Data do comentário"
    )

    employee_name = Column(
        String(200),
        nullable=False,
        comment="Nome do funcionário autor"
    )

    solicitation_id = Column(
        Integer,
        ForeignKey("solicitations.id", ondelete="CASCADE"),
        nullable=False,
    )

    solicitation = relationship("Solicitation", back_populates="comments")

    __table_args__ = (
        Index('idx_comment_solicitation', 'solicitation_id'),
        {'comment': 'Tabela de comentários sobre solicitações'}
    )

    def __repr__(self) -> str:
        return (
            f"<Comment("
            f"id={self.id}, "
            f"solicitation_id={self.solicitation_id}, "
            f"employee_name={self.employee_name}"
            f")>"
        )
