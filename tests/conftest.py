"""Fixtures compartilhadas para os testes."""

import base64
import os
from datetime import date, timedelta

# Precisa vir antes de qualquer import de ssda (settings é lido no import)
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("JWE_SECRET_KEY", base64.urlsafe_b64encode(b"k" * 32).decode())

import httpx
import pytest

from ssda.crypto import emitir_token_funcionario, hash_password
from ssda.database import criar_engine, criar_fabrica_sessoes, get_db, init_db
from ssda.main import app
from ssda.models import Comment, Document, Employee, Solicitation, Student


@pytest.fixture
async def sessoes(tmp_path):
    engine = criar_engine(f"sqlite+aiosqlite:///{tmp_path / 'ssda.db'}")
    await init_db(engine)

    fabrica = criar_fabrica_sessoes(engine)
    yield fabrica
    await engine.dispose()


@pytest.fixture
async def cliente_http(sessoes):
    async def _get_db():
        async with sessoes() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    transporte = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transporte, base_url="http://test") as cliente:
        yield cliente
    app.dependency_overrides.clear()


@pytest.fixture
async def cenario(sessoes):
    """Documentos, alunos, um funcionário e três solicitações em estados diferentes."""
    hoje = date.today()
    async with sessoes() as db:
        historico = Document(name="Histórico escolar", description="Histórico completo", attendance_deadline=5)
        declaracao = Document(name="Declaração de matrícula", description="Comprova vínculo", attendance_deadline=2)
        ana = Student(
            ra="1001", name="Ana Souza", email="ana@fatec.sp.gov.br", phone="(11) 4002-8922",
            cellphone="11987654321", course="ADS", period=3,
        )
        bruno = Student(
            ra="1002", name="Bruno Lima", email="bruno@fatec.sp.gov.br", phone="1133334444",
            course="GTI", period=5,
        )
        funcionario = Employee(name="Maria Secretaria", email="maria@fatec.sp.gov.br", password_hash=hash_password("segredo"))

        aberta = Solicitation(
            solicitation_date=hoje, estimated_completion_date=hoje + timedelta(days=5),
            status="Criada", priority=False, student=ana, document=historico,
        )
        andamento = Solicitation(
            solicitation_date=hoje - timedelta(days=3), estimated_completion_date=hoje + timedelta(days=1),
            status="Em andamento", priority=True, student=bruno, document=declaracao,
        )
        concluida = Solicitation(
            solicitation_date=hoje - timedelta(days=10), estimated_completion_date=hoje - timedelta(days=5),
            conclusion_date=hoje - timedelta(days=6), status="Concluida", priority=True,
            student=ana, document=declaracao,
        )
        concluida_sem_prioridade = Solicitation(
            solicitation_date=hoje - timedelta(days=20), estimated_completion_date=hoje - timedelta(days=15),
            conclusion_date=hoje - timedelta(days=16), status="Concluida", priority=False,
            student=bruno, document=historico,
        )
        db.add_all([historico, declaracao, ana, bruno, funcionario, aberta, andamento, concluida, concluida_sem_prioridade])
        await db.flush()

        db.add_all([
            Comment(description="Aguardando assinatura", employee_name="Maria Secretaria", solicitation_id=andamento.id),
            Comment(description="Assinado pela direção", employee_name="Maria Secretaria", solicitation_id=andamento.id),
        ])
        await db.commit()

        return {
            "historico": historico.id,
            "declaracao": declaracao.id,
            "ana": ana.id,
            "bruno": bruno.id,
            "funcionario": funcionario.id,
            "aberta": aberta.id,
            "andamento": andamento.id,
            "concluida": concluida.id,
            "concluida_sem_prioridade": concluida_sem_prioridade.id,
        }


@pytest.fixture
def token_funcionario(cenario):
    token, _ = emitir_token_funcionario(cenario["funcionario"], "Maria Secretaria")
    return token
