"""
Cliente da API SSDA e fluxos das telas de funcionários e alunos
"""
from .credenciais import ProvedorCredencial, CredencialEstatica, CredencialSessao
from .api import ApiCliente, BearerAuth
from .notificacoes import Notificacao, Notificador
from .filtros import FiltroSolicitacoes
from .sequencia import GuardaSequencia
from .painel import PainelSolicitacao
from .consulta import ConsultaSolicitacoes
from .aluno import EdicaoAluno

__all__ = [
    "ProvedorCredencial",
    "CredencialEstatica",
    "CredencialSessao",
    "ApiCliente",
    "BearerAuth",
    "Notificacao",
    "Notificador",
    "FiltroSolicitacoes",
    "GuardaSequencia",
    "PainelSolicitacao",
    "ConsultaSolicitacoes",
    "EdicaoAluno",
]
