"""Testes das regras de datas, status, filtros e senhas."""

from datetime import date

import pytest

from ssda.cliente import FiltroSolicitacoes, GuardaSequencia
from ssda.crypto import decrypt_token, emitir_token_funcionario, hash_password, verify_password
from ssda.datas import formatar_data_br, parse_data_br, validar_data_prevista
from ssda.erros import DataInvalida, DataNoPassado, TransicaoInvalida
from ssda.models import Solicitation
from ssda.status import StatusSolicitacao, status_permitidos, transicao_permitida

HOJE = date(2026, 10, 19)


def test_parse_data_br():
    assert parse_data_br("05/11/2026") == date(2026, 11, 5)
    assert formatar_data_br(date(2026, 11, 5)) == "05/11/2026"
    assert formatar_data_br(None) is None


@pytest.mark.parametrize("texto", ["", "5/11/2026", "2026-11-05", "31/04/2026", "00/01/2026"])
def test_parse_data_br_invalida(texto):
    with pytest.raises(DataInvalida):
        parse_data_br(texto)


def test_data_prevista_hoje_e_futura():
    assert validar_data_prevista("19/10/2026", HOJE) == HOJE
    assert validar_data_prevista("01/01/2027", HOJE) == date(2027, 1, 1)


def test_data_prevista_no_passado():
    with pytest.raises(DataNoPassado):
        validar_data_prevista("18/10/2026", HOJE)


def test_tabela_de_transicoes():
    assert status_permitidos("Criada") == [StatusSolicitacao.EM_ANDAMENTO, StatusSolicitacao.CONCLUIDA]
    assert status_permitidos("Concluida") == [StatusSolicitacao.CRIADA]
    assert transicao_permitida("Em andamento", "Concluida")
    assert not transicao_permitida("Concluida", "Em andamento")
    assert not transicao_permitida("Criada", "Cancelada")


def test_solicitacao_concluir_e_reabrir():
    solicitacao = Solicitation(status="Em andamento")

    solicitacao.alterar_status("Concluida", hoje=HOJE)
    assert solicitacao.conclusion_date == HOJE
    assert solicitacao.is_concluida

    solicitacao.alterar_status("Criada")
    assert solicitacao.conclusion_date is None

    with pytest.raises(TransicaoInvalida):
        solicitacao.alterar_status("Criada")


@pytest.mark.parametrize(
    "filtro, esperado",
    [
        (FiltroSolicitacoes(), "document_name&ra&priority"),
        (FiltroSolicitacoes(ra="  1001 "), "document_name&ra=1001&priority"),
        (FiltroSolicitacoes(document_name="RG & CPF", priority=True), "document_name=RG%20%26%20CPF&ra&priority=1"),
        (FiltroSolicitacoes(document_name="", ra="", priority=False), "document_name&ra&priority"),
    ],
)
def test_filtro_sempre_tem_tres_parametros(filtro, esperado):
    query = filtro.como_query()

    assert query == esperado
    assert [p.split("=")[0] for p in query.split("&")] == ["document_name", "ra", "priority"]


def test_guarda_sequencia():
    guarda = GuardaSequencia()
    primeiro = guarda.emitir("lista")
    segundo = guarda.emitir("lista")
    outro = guarda.emitir("status")

    assert not guarda.vigente("lista", primeiro)
    assert guarda.vigente("lista", segundo)
    assert guarda.vigente("status", outro)


def test_hash_de_senha():
    armazenado = hash_password("segredo")

    assert verify_password("segredo", armazenado)
    assert not verify_password("outra", armazenado)
    assert not verify_password("segredo", "lixo")


def test_token_de_funcionario():
    token, expira = emitir_token_funcionario(3, "Maria")
    payload = decrypt_token(token)

    assert payload["sub"] == 3
    assert payload["name"] == "Maria"
    assert payload["exp"] == expira
