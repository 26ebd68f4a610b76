"""
Engine e sessões do banco de dados da SSDA
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from .config import settings
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def criar_engine(url: str) -> AsyncEngine:
    """
    Cria o engine assíncrono para a URL informada.

    SQLite (DATABASE_URL_OVERRIDE de desenvolvimento e testes) não usa pool;
    PostgreSQL usa o pool configurado em settings.
    """
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.DATABASE_ECHO, poolclass=NullPool)
    return create_async_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_pre_ping=True,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
    )


def criar_fabrica_sessoes(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False, autoflush=False)


engine = criar_engine(settings.DATABASE_URL)
AsyncSessionLocal = criar_fabrica_sessoes(engine)


async def get_db() -> AsyncSession:
    """Sessão por requisição: commit ao final, rollback se a rota falhar"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: Optional[AsyncEngine] = None):
    """Cria as tabelas sem passar pelo Alembic (desenvolvimento local e testes)"""
    from . import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tabelas da SSDA criadas")


async def close_db():
    await engine.dispose()
    logger.info("Conexões do banco de dados fechadas")
