"""
Login de funcionários e validação do token bearer
"""
import logging
import time

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..crypto import decrypt_token, emitir_token_funcionario, verify_password
from ..database import get_db
from ..models import Employee
from ..schemas import SessionCreate, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def funcionario_autenticado(
    authorization: str | None = Header(None),
) -> dict:
    """
    Dependency que exige o header Authorization: Bearer <token>

    Retorna o payload do token (sub = id do funcionário, name = nome).
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Token não informado")

    token = authorization.split(" ", 1)[1].strip()
    try:
        payload = decrypt_token(token)
    except RuntimeError as e:
        logger.error(f"Configuração de token ausente: {e}")
        raise HTTPException(status_code=500, detail="JWE_SECRET_KEY not configured")
    except Exception:
        raise HTTPException(status_code=401, detail="Token inválido")

    if payload.get("exp", 0) < int(time.time()):
        raise HTTPException(status_code=401, detail="Token expirado")

    return payload


@router.post("", response_model=SessionResponse, summary="Login de funcionário")
async def criar_sessao(dados: SessionCreate, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Employee).where(Employee.email == dados.email))
    funcionario = result.scalar_one_or_none()

    if funcionario is None or not verify_password(dados.password, funcionario.password_hash):
        logger.info(f"Login recusado: email={dados.email}")
        raise HTTPException(status_code=401, detail="E-mail ou senha incorretos")

    try:
        token, expires_at = emitir_token_funcionario(funcionario.id, funcionario.name)
    except Exception as e:
        logger.error(f"Error generating JWE token: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate token")

    logger.info(f"Sessão criada: funcionario={funcionario.id}")
    return SessionResponse(token=token, employee_name=funcionario.name, expires_at=expires_at)
