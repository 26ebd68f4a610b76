"""
Notificações exibidas ao usuário após cada ação (os "toasts" da interface)
"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SUCESSO = "success"
ERRO = "error"
INFO = "info"

_NIVEIS = {SUCESSO: logging.INFO, INFO: logging.INFO, ERRO: logging.WARNING}


@dataclass(frozen=True)
class Notificacao:
    tipo: str
    titulo: str
    descricao: Optional[str] = None


class Notificador:
    """Acumula as notificações emitidas pelos fluxos, na ordem em que ocorreram"""

    def __init__(self):
        self.notificacoes: list[Notificacao] = []

    def notificar(self, tipo: str, titulo: str, descricao: Optional[str] = None) -> Notificacao:
        notificacao = Notificacao(tipo=tipo, titulo=titulo, descricao=descricao)
        self.notificacoes.append(notificacao)
        logger.log(_NIVEIS.get(tipo, logging.INFO), f"[{tipo}] {titulo}: {descricao or ''}")
        return notificacao

    def sucesso(self, titulo: str, descricao: Optional[str] = None) -> Notificacao:
        return self.notificar(SUCESSO, titulo, descricao)

    def erro(self, titulo: str, descricao: Optional[str] = None) -> Notificacao:
        return self.notificar(ERRO, titulo, descricao)

    def info(self, titulo: str, descricao: Optional[str] = None) -> Notificacao:
        return self.notificar(INFO, titulo, descricao)

    def erro_servidor(self) -> Notificacao:
        return self.erro(
            "Erro no servidor",
            "Entre em contato com a equipe de T.I. ou tente novamente mais tarde.",
        )

    @property
    def ultima(self) -> Optional[Notificacao]:
        return self.notificacoes[-1] if self.notificacoes else None

    def limpar(self) -> None:
        self.notificacoes.clear()
