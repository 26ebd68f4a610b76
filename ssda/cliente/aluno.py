"""
Fluxo da tela de edição de alunos
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..schemas import StudentUpdate
from .api import ApiCliente
from .notificacoes import Notificador

logger = logging.getLogger(__name__)

CAMPOS_ALUNO = ("ra", "name", "email", "phone", "cellphone", "course", "period")


class EdicaoAluno:
    def __init__(self, api: ApiCliente, student_id: int, notificador: Optional[Notificador] = None):
        self.api = api
        self.student_id = student_id
        self.notificador = notificador or Notificador()

        self.dados_formulario: dict = {}
        self.erros: dict[str, str] = {}

    async def carregar(self) -> None:
        try:
            aluno = await self.api.get(f"/students/{self.student_id}")
        except httpx.HTTPError as e:
            logger.error(f"Erro ao carregar aluno {self.student_id}: {e}")
            self.notificador.erro_servidor()
            return
        self.dados_formulario = {campo: aluno.get(campo) for campo in CAMPOS_ALUNO}

    def validar(self, dados: dict) -> Optional[StudentUpdate]:
        """Valida o formulário e preenche self.erros com a primeira mensagem de cada campo"""
        self.erros = {}
        formulario = {campo: dados.get(campo, "") for campo in CAMPOS_ALUNO}
        formulario["cellphone"] = dados.get("cellphone") or None
        try:
            return StudentUpdate.model_validate(formulario)
        except ValidationError as e:
            for erro in e.errors():
                campo = str(erro["loc"][0]) if erro["loc"] else "__all__"
                self.erros.setdefault(campo, erro["msg"])
            return None

    async def salvar(self, dados: dict) -> bool:
        aluno = self.validar(dados)
        if aluno is None:
            return False

        try:
            await self.api.put(f"/students/{self.student_id}", json=aluno.model_dump())
        except httpx.HTTPStatusError as e:
            logger.error(f"Erro ao atualizar aluno {self.student_id}: {e}")
            self.notificador.erro(
                "Erro na atualização",
                "Ocorreu um erro ao atualizar o cadastro, verifique as informações e tente novamente.",
            )
            return False
        except httpx.HTTPError as e:
            logger.error(f"Erro ao atualizar aluno {self.student_id}: {e}")
            self.notificador.erro_servidor()
            return False

        self.dados_formulario = aluno.model_dump()
        self.notificador.info("Aluno atualizado com sucesso")
        return True
