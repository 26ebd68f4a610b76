"""
Model SQLAlchemy para documentos que podem ser solicitados
"""
from sqlalchemy import Column, Integer, String, Text

from ..database import Base


class Document(Base):
    """Documento institucional oferecido aos alunos (declarações, históricos etc.)"""
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(
        String(200),
        nullable=False,
        comment="Nome do documento"
    )

    description = Column(
        Text,
        nullable=False,
        comment="Descrição do documento"
    )

    attendance_deadline = Column(
        Integer,
        nullable=False,
        comment="Prazo de atendimento em dias"
    )

    __table_args__ = (
        {'comment': 'Tabela de documentos disponíveis para solicitação'},
    )

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, name={self.name})>"
