"""
Rotas para abertura, consulta e atualização de solicitações de documentos
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from datetime import date, timedelta
from typing import Optional
import logging

from ..database import get_db
from ..erros import ErroDominio
from ..models import Solicitation, Student, Document
from ..schemas import (
    SolicitationCreate,
    SolicitationUpdate,
    montar_item,
    montar_detalhe,
)
from ..status import StatusSolicitacao

router = APIRouter()
concluidas_router = APIRouter()
logger = logging.getLogger(__name__)

_PRIORIDADE = {"1": True, "true": True, "0": False, "false": False}


def _parse_prioridade(priority: Optional[str]) -> Optional[bool]:
    """Parâmetro vazio (ou só o nome, ?priority) significa sem filtro"""
    if priority is None or priority.strip() == "":
        return None
    try:
        return _PRIORIDADE[priority.strip().lower()]
    except KeyError:
        raise HTTPException(status_code=422, detail="priority deve ser 1 ou 0")


def _consulta_filtrada(
    concluidas: bool,
    document_name: Optional[str],
    ra: Optional[str],
    priority: Optional[str],
):
    prioridade = _parse_prioridade(priority)

    query = (
        select(Solicitation)
        .join(Solicitation.student)
        .join(Solicitation.document)
    )
    if concluidas:
        query = query.where(Solicitation.status == StatusSolicitacao.CONCLUIDA.value)
    else:
        query = query.where(Solicitation.status != StatusSolicitacao.CONCLUIDA.value)

    if document_name:
        query = query.where(Document.name == document_name)
    if ra:
        query = query.where(Student.ra == ra)
    if prioridade is not None:
        query = query.where(Solicitation.priority == prioridade)

    if concluidas:
        return query.order_by(Solicitation.conclusion_date.desc(), Solicitation.id.asc())
    return query.order_by(
        Solicitation.priority.desc(),
        Solicitation.estimated_completion_date.asc(),
        Solicitation.id.asc(),
    )


async def _listar(db: AsyncSession, query) -> list:
    result = await db.execute(query)
    return [montar_item(s) for s in result.scalars().all()]


@router.get(
    "",
    response_model=dict,
    summary="Listar solicitações em aberto",
    description="Solicitações ainda não concluídas, prioritárias primeiro"
)
async def listar_solicitacoes(
    document_name: Optional[str] = Query(None, description="Nome do documento"),
    ra: Optional[str] = Query(None, description="RA do aluno"),
    priority: Optional[str] = Query(None, description="1 = apenas prioritárias, 0 = apenas sem prioridade"),
    db: AsyncSession = Depends(get_db),
):
    query = _consulta_filtrada(False, document_name, ra, priority)
    try:
        return {"status": "success", "data": await _listar(db, query)}
    except Exception as e:
        logger.error(f"Erro ao listar solicitações: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@concluidas_router.get(
    "",
    response_model=dict,
    summary="Listar solicitações concluídas",
)
async def listar_solicitacoes_concluidas(
    document_name: Optional[str] = Query(None, description="Nome do documento"),
    ra: Optional[str] = Query(None, description="RA do aluno"),
    priority: Optional[str] = Query(None, description="1 = apenas prioritárias, 0 = apenas sem prioridade"),
    db: AsyncSession = Depends(get_db),
):
    query = _consulta_filtrada(True, document_name, ra, priority)
    try:
        return {"status": "success", "data": await _listar(db, query)}
    except Exception as e:
        logger.error(f"Erro ao listar solicitações concluídas: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "",
    response_model=dict,
    status_code=201,
    summary="Abrir solicitação",
    description="Abre uma solicitação no status Criada, com data prevista calculada pelo prazo do documento"
)
async def criar_solicitacao(dados: SolicitationCreate, db: AsyncSession = Depends(get_db)):
    try:
        result = await db.execute(select(Student).where(Student.ra == dados.ra))
        aluno = result.scalar_one_or_none()
        if aluno is None:
            raise HTTPException(status_code=404, detail="Aluno não encontrado")

        documento = await db.get(Document, dados.document_id)
        if documento is None:
            raise HTTPException(status_code=404, detail="Documento não encontrado")

        hoje = date.today()
        solicitacao = Solicitation(
            solicitation_date=hoje,
            estimated_completion_date=hoje + timedelta(days=documento.attendance_deadline),
            status=StatusSolicitacao.CRIADA.value,
            priority=dados.priority,
            student=aluno,
            document=documento,
        )
        db.add(solicitacao)
        await db.commit()

        logger.info(
            f"Solicitação criada: id={solicitacao.id}, ra={aluno.ra}, "
            f"documento={documento.name}"
        )

        return {"status": "success", "data": montar_detalhe(solicitacao)}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao criar solicitação: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/{solicitation_id}",
    response_model=dict,
    summary="Detalhar solicitação",
)
async def obter_solicitacao(solicitation_id: int, db: AsyncSession = Depends(get_db)):
    solicitacao = await db.get(Solicitation, solicitation_id)
    if solicitacao is None:
        raise HTTPException(status_code=404, detail="Solicitação não encontrada")
    return {"status": "success", "data": montar_detalhe(solicitacao)}


@router.put(
    "/{solicitation_id}",
    response_model=dict,
    summary="Atualizar status ou data prevista",
    description="Atualização parcial: envie apenas status ou apenas estimated_completion_date"
)
async def atualizar_solicitacao(
    solicitation_id: int,
    dados: SolicitationUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        solicitacao = await db.get(Solicitation, solicitation_id)
        if solicitacao is None:
            raise HTTPException(status_code=404, detail="Solicitação não encontrada")

        if dados.status is not None:
            solicitacao.alterar_status(dados.status.value)
        else:
            solicitacao.alterar_data_prevista(dados.estimated_completion_date)

        await db.commit()

        logger.info(
            f"Solicitação atualizada: id={solicitation_id}, "
            f"campos={dados.model_dump(exclude_none=True, mode='json')}"
        )

        return {"status": "success", "data": montar_detalhe(solicitacao)}
    except ErroDominio as e:
        await db.rollback()
        raise HTTPException(status_code=422, detail=e.mensagem)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao atualizar solicitação: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))
