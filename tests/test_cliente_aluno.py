"""Testes do fluxo de edição de alunos."""

import json

import httpx
import pytest

from ssda.cliente import ApiCliente, EdicaoAluno, Notificador

ALUNO = {
    "id": 3,
    "ra": "1001",
    "name": "Ana Souza",
    "email": "ana@fatec.sp.gov.br",
    "phone": "(11) 4002-8922",
    "cellphone": "11987654321",
    "course": "ADS",
    "period": 3,
}


@pytest.fixture
def requisicoes():
    return []


@pytest.fixture
async def edicao(requisicoes):
    def handler(request):
        requisicoes.append(request)
        if request.method == "GET":
            return httpx.Response(200, json={"status": "success", "data": ALUNO})
        corpo = json.loads(request.content)
        if corpo["ra"] == "9999":
            return httpx.Response(409, json={"detail": "RA já cadastrado para outro aluno"})
        return httpx.Response(200, json={"status": "success", "data": {"id": 3, **corpo}})

    api = ApiCliente("http://ssda.test", transport=httpx.MockTransport(handler))
    edicao = EdicaoAluno(api, 3, Notificador())
    await edicao.carregar()
    requisicoes.clear()
    yield edicao
    await api.aclose()


async def test_carregar_preenche_formulario(edicao):
    assert edicao.dados_formulario["ra"] == "1001"
    assert "id" not in edicao.dados_formulario


async def test_salvar_envia_registro_completo(edicao, requisicoes):
    dados = {**edicao.dados_formulario, "period": "4"}

    ok = await edicao.salvar(dados)

    assert ok is True
    assert len(requisicoes) == 1
    assert requisicoes[0].method == "PUT"
    assert json.loads(requisicoes[0].content)["period"] == 4
    assert edicao.notificador.ultima.titulo == "Aluno atualizado com sucesso"


async def test_validacao_por_campo_nao_envia_requisicao(edicao, requisicoes):
    dados = {**edicao.dados_formulario, "name": "", "email": "ana", "phone": "123", "period": "0"}

    ok = await edicao.salvar(dados)

    assert ok is False
    assert requisicoes == []
    assert edicao.erros == {
        "name": "Nome obrigatório",
        "email": "Insira um e-mail válido",
        "phone": "Este número não é válido",
        "period": "Insira um período válido",
    }


async def test_periodo_fracionado(edicao, requisicoes):
    ok = await edicao.salvar({**edicao.dados_formulario, "period": "2.5"})

    assert ok is False
    assert edicao.erros["period"] == "Insira apenas números inteiros"


async def test_campos_ausentes_sao_obrigatorios(edicao, requisicoes):
    ok = await edicao.salvar({})

    assert ok is False
    assert edicao.erros["ra"] == "RA obrigatório"
    assert edicao.erros["course"] == "Curso obrigatório"
    assert edicao.erros["period"] == "Período obrigatório"
    assert "cellphone" not in edicao.erros


async def test_recusa_do_servidor(edicao, requisicoes):
    ok = await edicao.salvar({**edicao.dados_formulario, "ra": "9999"})

    assert ok is False
    assert edicao.notificador.ultima.titulo == "Erro na atualização"
