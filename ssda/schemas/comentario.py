"""
Schemas Pydantic para comentários
"""
from pydantic import BaseModel, Field, ConfigDict, field_serializer, field_validator
from datetime import date

from ..datas import formatar_data_br


class CommentCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=5000, description="Conteúdo do comentário")

    @field_validator('description')
    @classmethod
    def nao_vazio(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("É necessário escrever algo para adicionar um comentário.")
        return v


class CommentResponse(BaseModel):
    id: int
    description: str
    comment_date: date
    employee_name: str
    solicitation_id: int

    model_config = ConfigDict(from_attributes=True)

    @field_serializer('comment_date')
    def serializar_data(self, valor: date) -> str:
        return formatar_data_br(valor)
