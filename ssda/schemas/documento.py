"""
Schemas Pydantic para documentos
"""
from pydantic import BaseModel, Field, ConfigDict


class DocumentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, description="Nome do documento")
    description: str = Field(..., min_length=1, description="Descrição do documento")
    attendance_deadline: int = Field(..., ge=0, description="Prazo de atendimento em dias")


class DocumentResponse(BaseModel):
    id: int
    name: str
    description: str
    attendance_deadline: int

    model_config = ConfigDict(from_attributes=True)
