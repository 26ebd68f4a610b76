"""
Rotas para consulta e cadastro de documentos
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from ..cache import cache, gerar_chave_documentos, PREFIXO_DOCUMENTOS
from ..config import settings
from ..database import get_db
from ..models import Document
from ..schemas import DocumentCreate, DocumentResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=dict,
    summary="Listar documentos",
    description="Lista os documentos disponíveis para solicitação, em ordem alfabética"
)
async def listar_documentos(db: AsyncSession = Depends(get_db)):
    chave = gerar_chave_documentos()
    cached = await cache.get(chave)
    if cached is not None:
        return {"status": "success", "data": cached}

    try:
        result = await db.execute(select(Document).order_by(Document.name.asc()))
        documentos = [
            DocumentResponse.model_validate(d).model_dump()
            for d in result.scalars().all()
        ]
    except Exception as e:
        logger.error(f"Erro ao listar documentos: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    await cache.set(chave, documentos, ttl=settings.DOCUMENTOS_CACHE_TTL)
    return {"status": "success", "data": documentos}


@router.get(
    "/{document_id}",
    response_model=dict,
    summary="Detalhar documento",
)
async def obter_documento(document_id: int, db: AsyncSession = Depends(get_db)):
    documento = await db.get(Document, document_id)
    if documento is None:
        raise HTTPException(status_code=404, detail="Documento não encontrado")
    return {"status": "success", "data": DocumentResponse.model_validate(documento)}


@router.post(
    "",
    response_model=dict,
    status_code=201,
    summary="Cadastrar documento",
)
async def criar_documento(dados: DocumentCreate, db: AsyncSession = Depends(get_db)):
    try:
        documento = Document(
            name=dados.name,
            description=dados.description,
            attendance_deadline=dados.attendance_deadline,
        )
        db.add(documento)
        await db.commit()
        await db.refresh(documento)
    except Exception as e:
        logger.error(f"Erro ao cadastrar documento: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))

    await cache.clear_pattern(f"{PREFIXO_DOCUMENTOS}:*")
    logger.info(f"Documento cadastrado: id={documento.id}, nome={documento.name}")

    return {"status": "success", "data": DocumentResponse.model_validate(documento)}
