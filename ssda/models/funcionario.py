"""
Model SQLAlchemy para funcionários da secretaria
"""
from sqlalchemy import Column, Integer, String

from ..database import Base


class Employee(Base):
    """Funcionário que acompanha e atualiza as solicitações"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, comment="Nome do funcionário")

    email = Column(
        String(200),
        nullable=False,
        unique=True,
        comment="E-mail usado no login"
    )

    password_hash = Column(
        String(255),
        nullable=False,
        comment="Hash scrypt da senha (salt$hash em base64)"
    )

    __table_args__ = (
        {'comment': 'Tabela de funcionários'},
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email})>"
