"""
Model SQLAlchemy para alunos
"""
from sqlalchemy import Column, Integer, String

from ..database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)

    ra = Column(
        String(20),
        nullable=False,
        unique=True,
        comment="Registro acadêmico do aluno"
    )

    name = Column(String(200), nullable=False, comment="Nome do aluno")
    email = Column(String(200), nullable=False, comment="E-mail do aluno")
    phone = Column(String(20), nullable=False, comment="Telefone do aluno")
    cellphone = Column(String(20), nullable=True, comment="Celular do aluno")
    course = Column(String(100), nullable=False, comment="Curso matriculado")
    period = Column(Integer, nullable=False, comment="Período / ciclo atual")

    __table_args__ = (
        {'comment': 'Tabela de alunos'},
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, ra={self.ra}, name={self.name})>"
