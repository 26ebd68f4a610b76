"""
Model SQLAlchemy para solicitações de documentos
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from datetime import date

from ..database import Base
from ..datas import validar_data_prevista
from ..erros import TransicaoInvalida
from ..status import StatusSolicitacao, transicao_permitida


class Solicitation(Base):
    """
    Model para solicitações de documentos feitas pelos alunos

    O ciclo de vida é controlado pelo campo status (ver ssda.status)
    """
    __tablename__ = "solicitations"

    id = Column(Integer, primary_key=True, autoincrement=True)

    solicitation_date = Column(
        Date,
        nullable=False,
        default=date.today,
        comment="Data de abertura da solicitação"
    )

    estimated_completion_date = Column(
        Date,
        nullable=False,
        comment="Data prevista de conclusão"
    )

    conclusion_date = Column(
        Date,
        nullable=True,
        comment="Data de conclusão (preenchida ao concluir)"
    )

    status = Column(
        String(20),
        nullable=False,
        default=StatusSolicitacao.CRIADA.value,
        server_default=text("'Criada'"),
        comment="Criada, Em andamento ou Concluida"
    )

    priority = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        comment="Atender com prioridade"
    )

    student_id = Column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    )

    document_id = Column(
        Integer,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    )

    student = relationship("Student", lazy="selectin")
    document = relationship("Document", lazy="selectin")
    comments = relationship(
        "Comment",
        back_populates="solicitation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index('idx_solicitation_status', 'status'),
        Index('idx_solicitation_student', 'student_id'),
        {'comment': 'Tabela de solicitações de documentos'}
    )

    def __repr__(self) -> str:
        return (
            f"<Solicitation("
            f"id={self.id}, "
            f"status={self.status}, "
            f"priority={self.priority}"
            f")>"
        )

    def alterar_status(self, novo: str, hoje: date | None = None) -> None:
        """
        Move a solicitação para o novo status

        Concluir preenche a data de conclusão; reabrir (Criada) a limpa.
        """
        if not transicao_permitida(self.status, novo):
            raise TransicaoInvalida(
                f"Não é permitido alterar o status de '{self.status}' para '{novo}'"
            )
        self.status = StatusSolicitacao(novo).value
        if self.status == StatusSolicitacao.CONCLUIDA:
            self.conclusion_date = hoje or date.today()
        elif self.status == StatusSolicitacao.CRIADA:
            self.conclusion_date = None

    def alterar_data_prevista(self, texto: str, hoje: date | None = None) -> None:
        self.estimated_completion_date = validar_data_prevista(texto, hoje)

    @property
    def is_concluida(self) -> bool:
        return self.status == StatusSolicitacao.CONCLUIDA
