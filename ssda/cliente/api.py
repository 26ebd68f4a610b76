"""
Cliente HTTP assíncrono da API SSDA
"""
import logging
from typing import Any, Optional

import httpx

from .credenciais import CredencialSessao, ProvedorCredencial

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    """Anexa Authorization: Bearer <token> quando o provedor tiver um token"""

    def __init__(self, provedor: ProvedorCredencial):
        self.provedor = provedor

    def auth_flow(self, request: httpx.Request):
        token = self.provedor.obter_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


def _dados(response: httpx.Response) -> Any:
    """Extrai o campo data do envelope {"status": "success", "data": ...}"""
    if not response.content:
        return None
    try:
        corpo = response.json()
    except ValueError as e:
        # Corpo 2xx que não é JSON (página de proxy, por exemplo) conta como falha de transporte
        raise httpx.DecodingError(f"Resposta não é JSON: {e}", request=response.request) from e
    if isinstance(corpo, dict) and "data" in corpo:
        return corpo["data"]
    return corpo


class ApiCliente:
    """
    Wrapper de httpx.AsyncClient com o token do funcionário

    Erros de transporte (sem status HTTP) propagam como httpx.TransportError;
    respostas 4xx/5xx propagam como httpx.HTTPStatusError e corpos que não são
    JSON como httpx.DecodingError.
    """

    def __init__(
        self,
        base_url: str,
        credencial: Optional[ProvedorCredencial] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.credencial = credencial if credencial is not None else CredencialSessao()
        self._http = httpx.AsyncClient(
            base_url=base_url,
            auth=BearerAuth(self.credencial),
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "ApiCliente":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _enviar(self, metodo: str, caminho: str, **kwargs) -> Any:
        response = await self._http.request(metodo, caminho, **kwargs)
        logger.debug(f"{metodo} {response.request.url} -> {response.status_code}")
        response.raise_for_status()
        return _dados(response)

    async def get(self, caminho: str) -> Any:
        return await self._enviar("GET", caminho)

    async def put(self, caminho: str, json: dict) -> Any:
        return await self._enviar("PUT", caminho, json=json)

    async def post(self, caminho: str, json: dict) -> Any:
        return await self._enviar("POST", caminho, json=json)

    async def delete(self, caminho: str) -> Any:
        return await self._enviar("DELETE", caminho)

    async def autenticar(self, email: str, senha: str) -> dict:
        """Faz login do funcionário e guarda o token na credencial de sessão"""
        sessao = await self.post("/sessions", json={"email": email, "password": senha})
        if isinstance(self.credencial, CredencialSessao):
            self.credencial.definir(sessao["token"], sessao.get("employee_name"), sessao.get("expires_at"))
        return sessao
