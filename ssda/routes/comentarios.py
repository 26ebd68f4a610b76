"""
Rotas para comentários de funcionários sobre solicitações
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from ..database import get_db
from ..models import Comment, Solicitation
from ..schemas import CommentCreate, CommentResponse
from .sessoes import funcionario_autenticado

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/{solicitation_id}",
    response_model=dict,
    summary="Listar comentários de uma solicitação",
)
async def listar_comentarios(solicitation_id: int, db: AsyncSession = Depends(get_db)):
    try:
        result = await db.execute(
            select(Comment)
            .where(Comment.solicitation_id == solicitation_id)
            .order_by(Comment.id.asc())
        )
        return {
            "status": "success",
            "data": [CommentResponse.model_validate(c) for c in result.scalars().all()],
        }
    except Exception as e:
        logger.error(f"Erro ao listar comentários: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/{solicitation_id}",
    response_model=dict,
    status_code=201,
    summary="Comentar uma solicitação",
)
async def criar_comentario(
    solicitation_id: int,
    dados: CommentCreate,
    funcionario: dict = Depends(funcionario_autenticado),
    db: AsyncSession = Depends(get_db),
):
    try:
        solicitacao = await db.get(Solicitation, solicitation_id)
        if solicitacao is None:
            raise HTTPException(status_code=404, detail="Solicitação não encontrada")

        comentario = Comment(
            description=dados.description,
            employee_name=funcionario["name"],
            solicitation_id=solicitation_id,
        )
        db.add(comentario)
        await db.commit()
        await db.refresh(comentario)

        logger.info(f"Comentário criado: solicitacao={solicitation_id}, funcionario={funcionario['sub']}")

        return {"status": "success", "data": CommentResponse.model_validate(comentario)}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao criar comentário: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))


@router.delete(
    "/{comment_id}",
    response_model=dict,
    summary="Excluir comentário",
)
async def deletar_comentario(comment_id: int, db: AsyncSession = Depends(get_db)):
    try:
        comentario = await db.get(Comment, comment_id)
        if comentario is None:
            raise HTTPException(status_code=404, detail="Comentário não encontrado")

        await db.delete(comentario)
        await db.commit()

        logger.info(f"Comentário excluído: id={comment_id}")

        return {"status": "success", "message": "Comentário excluído com sucesso"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao deletar comentário: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))
