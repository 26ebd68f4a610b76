"""
Schemas Pydantic para solicitações de documentos
"""
from pydantic import BaseModel, Field, ConfigDict, field_serializer, model_validator
from datetime import date
from typing import Optional

from ..datas import formatar_data_br
from ..status import StatusSolicitacao


class SolicitationCreate(BaseModel):
    ra: str = Field(..., min_length=1, max_length=20, description="RA do aluno solicitante")
    document_id: int = Field(..., description="ID do documento solicitado")
    priority: bool = Field(False, description="Atender com prioridade")


class SolicitationUpdate(BaseModel):
    """Atualização parcial: apenas um campo por requisição"""
    status: Optional[StatusSolicitacao] = Field(None, description="Novo status")
    estimated_completion_date: Optional[str] = Field(
        None,
        description="Nova data prevista de conclusão (dd/mm/aaaa)",
        examples=["25/12/2025"]
    )

    @model_validator(mode='after')
    def validate_campo_unico(self):
        if self.status is not None and self.estimated_completion_date is not None:
            raise ValueError("Defina apenas status ou estimated_completion_date, não ambos")
        if self.status is None and self.estimated_completion_date is None:
            raise ValueError("Defina status ou estimated_completion_date")
        return self


class _DatasSolicitacao(BaseModel):
    solicitation_date: date
    estimated_completion_date: date
    conclusion_date: Optional[date] = None

    @field_serializer('solicitation_date', 'estimated_completion_date', 'conclusion_date')
    def serializar_data(self, valor: Optional[date]) -> Optional[str]:
        return formatar_data_br(valor)


class SolicitationItem(_DatasSolicitacao):
    """Item das listagens de solicitações (abertas e concluídas)"""
    id: int
    status: str
    priority: bool
    ra: str
    name: str
    course: str
    period: int
    document_name: str


class SolicitationDetail(_DatasSolicitacao):
    """Dados da solicitação junto com os dados do aluno e do documento"""
    solicitation_id: int
    status: str
    priority: bool
    document_name: str
    description: str
    ra: str
    name: str
    email: str
    course: str
    period: int

    model_config = ConfigDict(from_attributes=True)


def montar_item(solicitacao) -> SolicitationItem:
    return SolicitationItem(
        id=solicitacao.id,
        solicitation_date=solicitacao.solicitation_date,
        estimated_completion_date=solicitacao.estimated_completion_date,
        conclusion_date=solicitacao.conclusion_date,
        status=solicitacao.status,
        priority=solicitacao.priority,
        ra=solicitacao.student.ra,
        name=solicitacao.student.name,
        course=solicitacao.student.course,
        period=solicitacao.student.period,
        document_name=solicitacao.document.name,
    )


def montar_detalhe(solicitacao) -> SolicitationDetail:
    return SolicitationDetail(
        solicitation_id=solicitacao.id,
        solicitation_date=solicitacao.solicitation_date,
        estimated_completion_date=solicitacao.estimated_completion_date,
        conclusion_date=solicitacao.conclusion_date,
        status=solicitacao.status,
        priority=solicitacao.priority,
        document_name=solicitacao.document.name,
        description=solicitacao.document.description,
        ra=solicitacao.student.ra,
        name=solicitacao.student.name,
        email=solicitacao.student.email,
        course=solicitacao.student.course,
        period=solicitacao.student.period,
    )
