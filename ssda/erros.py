"""
Tipos de erro da API e exceções de regra de negócio
"""
from pydantic import BaseModel
from enum import Enum


class ErrorType(str, Enum):
    AUTHENTICATION_ERROR = "authentication_error"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    PROCESSING_ERROR = "processing_error"
    DATABASE_ERROR = "database_error"


class ErrorDetail(BaseModel):
    type: ErrorType
    message: str
    details: dict | None = None


class ErroDominio(Exception):
    """Violação de uma regra de negócio das solicitações"""

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem


class DataInvalida(ErroDominio):
    pass


class DataNoPassado(ErroDominio):
    pass


class TransicaoInvalida(ErroDominio):
    pass
