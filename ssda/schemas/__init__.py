"""
Schemas Pydantic para validação e serialização
"""
from .documento import DocumentCreate, DocumentResponse
from .aluno import StudentUpdate, StudentResponse
from .solicitacao import (
    SolicitationCreate,
    SolicitationUpdate,
    SolicitationItem,
    SolicitationDetail,
    montar_item,
    montar_detalhe,
)
from .comentario import CommentCreate, CommentResponse
from .sessao import SessionCreate, SessionResponse

__all__ = [
    "DocumentCreate",
    "DocumentResponse",
    "StudentUpdate",
    "StudentResponse",
    "SolicitationCreate",
    "SolicitationUpdate",
    "SolicitationItem",
    "SolicitationDetail",
    "montar_item",
    "montar_detalhe",
    "CommentCreate",
    "CommentResponse",
    "SessionCreate",
    "SessionResponse",
]
