"""
Models do banco de dados
"""
from .documento import Document
from .aluno import Student
from .funcionario import Employee
from .solicitacao import Solicitation
from .comentario import Comment

__all__ = [
    "Document",
    "Student",
    "Employee",
    "Solicitation",
    "Comment",
]
