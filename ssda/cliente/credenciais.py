"""
Provedores do token bearer usado pelo cliente da API.

O token é injetado no cliente em vez de ser lido de um armazenamento
global, o que permite trocar a origem (sessão de login, variável de
ambiente, testes) sem alterar os fluxos.
"""
from typing import Optional, Protocol


class ProvedorCredencial(Protocol):
    def obter_token(self) -> Optional[str]:
        ...


class CredencialEstatica:
    """Token fixo, informado na criação"""

    def __init__(self, token: Optional[str]):
        self._token = token

    def obter_token(self) -> Optional[str]:
        return self._token


class CredencialSessao:
    """Token obtido no login do funcionário (POST /sessions)"""

    def __init__(self):
        self._token: Optional[str] = None
        self.employee_name: Optional[str] = None
        self.expires_at: Optional[int] = None

    def definir(self, token: str, employee_name: str | None = None, expires_at: int | None = None) -> None:
        self._token = token
        self.employee_name = employee_name
        self.expires_at = expires_at

    def limpar(self) -> None:
        self._token = None
        self.employee_name = None
        self.expires_at = None

    def obter_token(self) -> Optional[str]:
        return self._token
