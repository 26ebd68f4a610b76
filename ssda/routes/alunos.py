"""
Rotas para consulta e edição de alunos
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
import logging

from ..database import get_db
from ..models import Student
from ..schemas import StudentUpdate, StudentResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=dict, summary="Listar alunos")
async def listar_alunos(db: AsyncSession = Depends(get_db)):
    try:
        result = await db.execute(select(Student).order_by(Student.name.asc()))
        return {
            "status": "success",
            "data": [StudentResponse.model_validate(a) for a in result.scalars().all()],
        }
    except Exception as e:
        logger.error(f"Erro ao listar alunos: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{student_id}", response_model=dict, summary="Detalhar aluno")
async def obter_aluno(student_id: int, db: AsyncSession = Depends(get_db)):
    aluno = await db.get(Student, student_id)
    if aluno is None:
        raise HTTPException(status_code=404, detail="Aluno não encontrado")
    return {"status": "success", "data": StudentResponse.model_validate(aluno)}


@router.put(
    "/{student_id}",
    response_model=dict,
    summary="Atualizar aluno",
    description="Substitui o cadastro completo do aluno"
)
async def atualizar_aluno(
    student_id: int,
    dados: StudentUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        aluno = await db.get(Student, student_id)
        if aluno is None:
            raise HTTPException(status_code=404, detail="Aluno não encontrado")

        # RA é único entre os alunos
        conflito = await db.execute(
            select(Student.id).where(and_(
                Student.ra == dados.ra,
                Student.id != student_id,
            ))
        )
        if conflito.scalar_one_or_none() is not None:
            raise HTTPException(status_code=409, detail="RA já cadastrado para outro aluno")

        for campo, valor in dados.model_dump().items():
            setattr(aluno, campo, valor)
        await db.commit()

        logger.info(f"Aluno atualizado: id={student_id}, ra={dados.ra}")

        return {"status": "success", "data": StudentResponse.model_validate(aluno)}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erro ao atualizar aluno: {e}")
        await db.rollback()
        raise HTTPException(status_code=500, detail=str(e))
