import redis.asyncio as aioredis
import orjson
import logging
from typing import Optional, Any
from .config import settings

logger = logging.getLogger(__name__)

PREFIXO_DOCUMENTOS = "documentos"


class RedisCache:
    """
    Cliente Redis assíncrono para cache de consultas da API

    Qualquer falha do Redis é tratada como cache vazio: as rotas
    continuam respondendo a partir do banco de dados.
    """
    def __init__(self):
        self.redis_client = None
        self._connected = False

    async def connect(self):
        """Conecta ao Redis com tratamento de erros"""
        if self._connected or not settings.REDIS_ENABLED:
            return

        try:
            if settings.REDIS_PASSWORD:
                redis_url = f"redis://{settings.REDIS_USERNAME}:{settings.REDIS_PASSWORD}@{settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}"
            else:
                redis_url = f"redis://{settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}"

            self.redis_client = aioredis.from_url(
                redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=20
            )

            await self.redis_client.ping()
            self._connected = True
            logger.info("Conexão com Redis estabelecida com sucesso")
        except Exception as e:
            logger.warning(f"Não foi possível conectar ao Redis: {str(e)}")
            self.redis_client = None
            self._connected = False

    async def close(self):
        """Fecha a conexão com o Redis"""
        if self.redis_client:
            await self.redis_client.aclose()
            self._connected = False

    async def is_available(self) -> bool:
        if self.redis_client is None:
            return False
        try:
            await self.redis_client.ping()
            return True
        except Exception:
            return False

    async def get(self, key: str) -> Optional[Any]:
        """
        Obtém um valor do cache

        Args:
            key: Chave do cache

        Returns:
            Valor do cache ou None se não encontrado ou em caso de erro
        """
        if not self._connected:
            await self.connect()

        if self.redis_client is None:
            return None

        try:
            value = await self.redis_client.get(key)
            if value:
                logger.debug(f"[CACHE HIT] Chave: {key}")
                return orjson.loads(value)
            logger.debug(f"[CACHE MISS] Chave: {key}")
            return None
        except Exception as e:
            logger.warning(f"Erro ao obter cache para chave {key}: {str(e)}")
            return None

    async def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """
        Define um valor no cache

        Args:
            key: Chave do cache
            value: Valor serializável por orjson
            ttl: Tempo de expiração em segundos (padrão: 1 hora)
        """
        if not self._connected:
            await self.connect()

        if self.redis_client is None:
            return False

        try:
            serialized_value = orjson.dumps(value).decode('utf-8')
            await self.redis_client.setex(key, ttl, serialized_value)
            logger.debug(f"[CACHE SET] Chave: {key}, TTL: {ttl}s")
            return True
        except Exception as e:
            logger.warning(f"Erro ao definir cache para chave {key}: {str(e)}")
            return False

    async def clear_pattern(self, pattern: str) -> int:
        """Remove todas as chaves que correspondem ao padrão usando SCAN (não bloqueia)"""
        if not self._connected:
            await self.connect()

        if self.redis_client is None:
            return 0

        try:
            deleted = 0
            cursor = 0
            while True:
                cursor, keys = await self.redis_client.scan(cursor, match=pattern, count=100)
                if keys:
                    deleted += await self.redis_client.delete(*keys)
                if cursor == 0:
                    break
            logger.debug(f"[CACHE CLEAR] Padrão: {pattern}, Chaves removidas: {deleted}")
            return deleted
        except Exception as e:
            logger.warning(f"Erro ao limpar cache com padrão {pattern}: {str(e)}")
            return 0


# Instância global do cache
cache = RedisCache()


def gerar_chave_documentos() -> str:
    """Chave da listagem completa de documentos"""
    return f"{PREFIXO_DOCUMENTOS}:lista"

