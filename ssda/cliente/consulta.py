"""
Fluxo das telas de listagem de solicitações com filtros
"""
import logging
from typing import Optional

import httpx

from .filtros import FiltroSolicitacoes
from .api import ApiCliente
from .notificacoes import Notificador
from .sequencia import GuardaSequencia

logger = logging.getLogger(__name__)

CAMINHO_CONCLUIDAS = "/finished-solicitations"
CAMINHO_ABERTAS = "/solicitations"


class ConsultaSolicitacoes:
    """Listagem de solicitações concluídas (padrão) ou em aberto"""

    def __init__(
        self,
        api: ApiCliente,
        notificador: Optional[Notificador] = None,
        concluidas: bool = True,
    ):
        self.api = api
        self.notificador = notificador or Notificador()
        self.caminho = CAMINHO_CONCLUIDAS if concluidas else CAMINHO_ABERTAS
        self._sequencia = GuardaSequencia()

        self.documentos: list[dict] = []
        self.solicitacoes: list[dict] = []

    async def carregar(self) -> None:
        await self.carregar_documentos()

        numero = self._sequencia.emitir("lista")
        try:
            solicitacoes = await self.api.get(self.caminho)
        except httpx.HTTPError as e:
            if not self._sequencia.vigente("lista", numero):
                return
            logger.error(f"Erro ao carregar solicitações: {e}")
            self.notificador.erro_servidor()
            return
        if self._sequencia.vigente("lista", numero):
            self.solicitacoes = list(solicitacoes or [])

    async def carregar_documentos(self) -> None:
        try:
            self.documentos = list(await self.api.get("/documents") or [])
        except httpx.HTTPError as e:
            logger.error(f"Erro ao carregar documentos: {e}")
            self.notificador.erro("Erro ao carregar documentos", "Atualize a página e tente novamente")

    async def filtrar(self, filtro: FiltroSolicitacoes) -> bool:
        numero = self._sequencia.emitir("lista")
        try:
            solicitacoes = await self.api.get(f"{self.caminho}?{filtro.como_query()}")
        except httpx.HTTPError as e:
            # Falha de um filtro já substituído por outro mais novo é ignorada
            if not self._sequencia.vigente("lista", numero):
                return False
            logger.error(f"Erro ao filtrar solicitações: {e}")
            self.notificador.erro(
                "Erro ao filtrar",
                "Ocorreu um erro ao filtrar as solicitações, atualize a página e tente novamente.",
            )
            return False

        # Um filtro mais novo já foi enviado; este resultado é descartado
        if not self._sequencia.vigente("lista", numero):
            return False

        self.solicitacoes = list(solicitacoes or [])
        self.notificador.info("Filtro realizado com sucesso")
        return True
