"""
Fluxo da tela de detalhes de uma solicitação (visão do funcionário):
atualização de status, de data prevista e comentários.
"""
import logging
from datetime import date
from typing import Callable, Optional

import httpx

from ..datas import validar_data_prevista
from ..erros import DataInvalida, DataNoPassado
from ..status import StatusSolicitacao, status_permitidos
from .api import ApiCliente
from .notificacoes import Notificador
from .sequencia import GuardaSequencia

logger = logging.getLogger(__name__)

TITULO_DATA = "Data prevista de conclusão"


class PainelSolicitacao:
    """
    Estado local da tela de detalhes de uma solicitação

    O registro local só é alterado depois da confirmação do servidor.
    """

    def __init__(
        self,
        api: ApiCliente,
        solicitation_id: int,
        notificador: Optional[Notificador] = None,
        hoje: Callable[[], date] = date.today,
    ):
        self.api = api
        self.solicitation_id = solicitation_id
        self.notificador = notificador or Notificador()
        self._hoje = hoje
        self._sequencia = GuardaSequencia()

        self.detalhe: Optional[dict] = None
        self.comentarios: list[dict] = []

        # Campos editáveis da tela
        self.status_selecionado = ""
        self.data_prevista = ""
        self.comentario = ""

    async def carregar(self) -> None:
        await self.carregar_detalhe()
        await self.carregar_comentarios()

    async def carregar_detalhe(self) -> None:
        numero = self._sequencia.emitir("detalhe")
        try:
            detalhe = await self.api.get(f"/solicitations/{self.solicitation_id}")
        except httpx.HTTPError as e:
            if not self._sequencia.vigente("detalhe", numero):
                return
            logger.error(f"Erro ao carregar solicitação {self.solicitation_id}: {e}")
            self.notificador.erro_servidor()
            return
        if self._sequencia.vigente("detalhe", numero):
            self.detalhe = detalhe

    async def carregar_comentarios(self) -> None:
        numero = self._sequencia.emitir("comentarios")
        try:
            comentarios = await self.api.get(f"/comments/{self.solicitation_id}")
        except httpx.HTTPError as e:
            if not self._sequencia.vigente("comentarios", numero):
                return
            logger.error(f"Erro ao carregar comentários da solicitação {self.solicitation_id}: {e}")
            self.notificador.erro_servidor()
            return
        if self._sequencia.vigente("comentarios", numero):
            self.comentarios = list(comentarios or [])

    def opcoes_status(self) -> list[StatusSolicitacao]:
        if self.detalhe is None:
            return []
        try:
            return status_permitidos(self.detalhe["status"])
        except ValueError:
            logger.warning(f"Status desconhecido na solicitação {self.solicitation_id}: {self.detalhe['status']!r}")
            return []

    async def atualizar_status(self, novo: Optional[str] = None) -> bool:
        if novo is not None:
            self.status_selecionado = novo
        escolhido = self.status_selecionado

        if not escolhido:
            self.notificador.erro("Status", "É necessário escolher um status para que ocorra a atualização")
            return False

        if escolhido not in [s.value for s in self.opcoes_status()]:
            self.notificador.erro("Status", f"Não é permitido alterar a solicitação para '{escolhido}'")
            return False

        numero = self._sequencia.emitir("status")
        try:
            resposta = await self.api.put(
                f"/solicitations/{self.solicitation_id}",
                json={"status": escolhido},
            )
        except httpx.HTTPError as e:
            if not self._sequencia.vigente("status", numero):
                return False
            logger.error(f"Erro ao atualizar status da solicitação {self.solicitation_id}: {e}")
            self.notificador.erro_servidor()
            return False

        if not self._sequencia.vigente("status", numero):
            return False

        self.detalhe["status"] = escolhido
        if isinstance(resposta, dict) and "conclusion_date" in resposta:
            self.detalhe["conclusion_date"] = resposta["conclusion_date"]
        self.status_selecionado = ""

        self.notificador.sucesso("Atualização de status", "Status atualizado com sucesso.")
        return True

    async def atualizar_data_prevista(self, texto: Optional[str] = None) -> bool:
        if texto is not None:
            self.data_prevista = texto
        texto = self.data_prevista

        try:
            validar_data_prevista(texto, self._hoje())
        except DataInvalida:
            self.notificador.erro(TITULO_DATA, "Esta não é uma data válida")
            return False
        except DataNoPassado:
            self.notificador.erro(TITULO_DATA, "Não é permitido atualizar para uma data inferior a de hoje.")
            return False

        numero = self._sequencia.emitir("data_prevista")
        try:
            await self.api.put(
                f"/solicitations/{self.solicitation_id}",
                json={"estimated_completion_date": texto},
            )
        except httpx.HTTPError as e:
            if not self._sequencia.vigente("data_prevista", numero):
                return False
            logger.error(f"Erro ao atualizar data prevista da solicitação {self.solicitation_id}: {e}")
            self.notificador.erro_servidor()
            return False

        if not self._sequencia.vigente("data_prevista", numero):
            return False

        if self.detalhe is not None:
            self.detalhe["estimated_completion_date"] = texto
        self.data_prevista = ""

        self.notificador.sucesso("Atualização de data", "Data prevista de conclusão atualizada com sucesso.")
        return True

    async def comentar(self, texto: Optional[str] = None) -> bool:
        if texto is not None:
            self.comentario = texto

        if not self.comentario.strip():
            self.notificador.erro("Comentário", "É necessário escrever algo para adicionar um comentário.")
            return False

        try:
            await self.api.post(
                f"/comments/{self.solicitation_id}",
                json={"description": self.comentario},
            )
        except httpx.HTTPError as e:
            logger.error(f"Erro ao comentar a solicitação {self.solicitation_id}: {e}")
            self.notificador.erro_servidor()
            return False

        self.notificador.sucesso("Comentário", "Novo comentário adicionado com sucesso.")
        self.comentario = ""

        await self.carregar_comentarios()
        return True

    async def excluir_comentario(self, comment_id: int) -> bool:
        try:
            await self.api.delete(f"/comments/{comment_id}")
        except httpx.HTTPStatusError as e:
            logger.error(f"Erro ao excluir comentário {comment_id}: {e}")
            self.notificador.erro(
                "Erro ao deletar",
                "Ocorreu um erro ao deletar o comentário, atualize a página e tente novamente.",
            )
            return False
        except httpx.HTTPError as e:
            logger.error(f"Erro ao excluir comentário {comment_id}: {e}")
            self.notificador.erro_servidor()
            return False

        self.comentarios = [c for c in self.comentarios if c["id"] != comment_id]
        self.notificador.info("Comentário deletado")
        return True
