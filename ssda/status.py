"""
Status das solicitações e regras de transição entre eles.

Compartilhado entre a API (que rejeita transições inválidas) e o cliente
dos fluxos de tela (que só oferece as opções permitidas).
"""
from enum import Enum


class StatusSolicitacao(str, Enum):
    CRIADA = "Criada"
    EM_ANDAMENTO = "Em andamento"
    CONCLUIDA = "Concluida"


# Uma solicitação concluída só pode ser reaberta
_TRANSICOES = {
    StatusSolicitacao.CRIADA: [StatusSolicitacao.EM_ANDAMENTO, StatusSolicitacao.CONCLUIDA],
    StatusSolicitacao.EM_ANDAMENTO: [StatusSolicitacao.EM_ANDAMENTO, StatusSolicitacao.CONCLUIDA],
    StatusSolicitacao.CONCLUIDA: [StatusSolicitacao.CRIADA],
}


def status_permitidos(atual: str) -> list[StatusSolicitacao]:
    """Retorna os status para os quais uma solicitação pode ser movida."""
    return list(_TRANSICOES[StatusSolicitacao(atual)])


def transicao_permitida(atual: str, novo: str) -> bool:
    try:
        return StatusSolicitacao(novo) in status_permitidos(atual)
    except ValueError:
        return False
