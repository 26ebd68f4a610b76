"""Testes do fluxo de listagem e filtro de solicitações."""

import asyncio

import httpx
import pytest

from ssda.cliente import ApiCliente, ConsultaSolicitacoes, FiltroSolicitacoes, Notificador

DOCUMENTOS = [{"id": 1, "name": "Declaração de matrícula"}, {"id": 2, "name": "Histórico escolar"}]


def _montar(handler, concluidas=True):
    api = ApiCliente("http://ssda.test", transport=httpx.MockTransport(handler))
    return api, ConsultaSolicitacoes(api, Notificador(), concluidas=concluidas)


async def test_filtro_envia_os_tres_parametros():
    consultas = []

    def handler(request):
        if request.url.path == "/documents":
            return httpx.Response(200, json={"status": "success", "data": DOCUMENTOS})
        consultas.append(request.url.query.decode())
        return httpx.Response(200, json={"status": "success", "data": [{"id": 5}]})

    api, consulta = _montar(handler)
    await consulta.carregar()
    ok = await consulta.filtrar(FiltroSolicitacoes(document_name="Histórico escolar", ra="1001", priority=True))
    await api.aclose()

    assert ok is True
    assert consultas[0] == ""
    assert consultas[1] == "document_name=Hist%C3%B3rico%20escolar&ra=1001&priority=1"
    assert consulta.documentos == DOCUMENTOS
    assert consulta.solicitacoes == [{"id": 5}]
    assert consulta.notificador.ultima.titulo == "Filtro realizado com sucesso"


async def test_filtro_vazio_envia_apenas_os_nomes():
    consultas = []

    def handler(request):
        consultas.append((request.url.path, request.url.query.decode()))
        return httpx.Response(200, json={"status": "success", "data": []})

    api, consulta = _montar(handler, concluidas=False)
    await consulta.filtrar(FiltroSolicitacoes())
    await api.aclose()

    assert consultas == [("/solicitations", "document_name&ra&priority")]


async def test_erro_no_filtro_mantem_lista():
    def handler(request):
        if request.url.query:
            return httpx.Response(500, json={"detail": "boom"})
        return httpx.Response(200, json={"status": "success", "data": [{"id": 1}]})

    api, consulta = _montar(handler)
    await consulta.carregar()
    ok = await consulta.filtrar(FiltroSolicitacoes(ra="1001"))
    await api.aclose()

    assert ok is False
    assert consulta.solicitacoes == [{"id": 1}]
    assert consulta.notificador.ultima.titulo == "Erro ao filtrar"


async def test_erro_ao_carregar_documentos():
    def handler(request):
        if request.url.path == "/documents":
            raise httpx.ConnectError("offline", request=request)
        return httpx.Response(200, json={"status": "success", "data": []})

    api, consulta = _montar(handler)
    await consulta.carregar()
    await api.aclose()

    titulos = [n.titulo for n in consulta.notificador.notificacoes]
    assert titulos == ["Erro ao carregar documentos"]


async def test_resposta_atrasada_de_filtro_antigo_e_descartada():
    liberar_primeiro = asyncio.Event()

    async def handler(request):
        if "ra=1" in request.url.query.decode():
            await liberar_primeiro.wait()
            return httpx.Response(200, json={"status": "success", "data": [{"id": 1}]})
        return httpx.Response(200, json={"status": "success", "data": [{"id": 2}]})

    api, consulta = _montar(handler)
    antigo = asyncio.create_task(consulta.filtrar(FiltroSolicitacoes(ra="1")))
    await asyncio.sleep(0)
    novo = await consulta.filtrar(FiltroSolicitacoes(ra="2"))
    liberar_primeiro.set()
    resultado_antigo = await antigo
    await api.aclose()

    assert novo is True
    assert resultado_antigo is False
    assert consulta.solicitacoes == [{"id": 2}]


async def test_falha_atrasada_de_filtro_antigo_nao_notifica():
    liberar_primeiro = asyncio.Event()

    async def handler(request):
        if "ra=1" in request.url.query.decode():
            await liberar_primeiro.wait()
            raise httpx.ConnectError("offline", request=request)
        return httpx.Response(200, json={"status": "success", "data": [{"id": 2}]})

    api, consulta = _montar(handler)
    antigo = asyncio.create_task(consulta.filtrar(FiltroSolicitacoes(ra="1")))
    await asyncio.sleep(0)
    novo = await consulta.filtrar(FiltroSolicitacoes(ra="2"))
    liberar_primeiro.set()
    resultado_antigo = await antigo
    await api.aclose()

    assert novo is True
    assert resultado_antigo is False
    assert consulta.solicitacoes == [{"id": 2}]
    assert [n.tipo for n in consulta.notificador.notificacoes] == ["info"]
    assert consulta.notificador.ultima.titulo == "Filtro realizado com sucesso"
