"""Fluxos do cliente executados contra a API real (SQLite temporário)."""

from datetime import date, timedelta

import httpx

from ssda.cliente import ApiCliente, ConsultaSolicitacoes, FiltroSolicitacoes, PainelSolicitacao
from ssda.datas import formatar_data_br
from ssda.main import app


def _api():
    return ApiCliente("http://test", transport=httpx.ASGITransport(app=app))


async def test_funcionario_conclui_e_comenta(cliente_http, cenario):
    async with _api() as api:
        await api.autenticar("maria@fatec.sp.gov.br", "segredo")

        painel = PainelSolicitacao(api, cenario["andamento"])
        await painel.carregar()
        assert painel.detalhe["status"] == "Em andamento"

        nova_data = formatar_data_br(date.today() + timedelta(days=7))
        assert await painel.atualizar_data_prevista(nova_data) is True
        assert await painel.atualizar_status("Concluida") is True
        assert await painel.comentar("Entregue ao aluno") is True

        comentario_novo = painel.comentarios[-1]
        assert comentario_novo["employee_name"] == "Maria Secretaria"

        consulta = ConsultaSolicitacoes(api)
        await consulta.filtrar(FiltroSolicitacoes(ra="1002", priority=True))
        assert [s["id"] for s in consulta.solicitacoes] == [cenario["andamento"]]
        assert consulta.solicitacoes[0]["estimated_completion_date"] == nova_data


async def test_comentario_sem_login_gera_erro(cliente_http, cenario):
    async with _api() as api:
        painel = PainelSolicitacao(api, cenario["aberta"])
        await painel.carregar()

        assert await painel.comentar("Sem token") is False
        assert painel.notificador.ultima.titulo == "Erro no servidor"
