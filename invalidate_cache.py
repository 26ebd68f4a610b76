#!/usr/bin/env python3
"""
Invalida o cache da listagem de documentos.

Usage:
    python invalidate_cache.py            # remove todas as chaves documentos:*

Usa as mesmas variáveis de ambiente da API (REDIS_HOST, REDIS_PORT,
REDIS_DB, REDIS_USERNAME, REDIS_PASSWORD).
"""

import asyncio
import sys

from ssda.cache import cache, PREFIXO_DOCUMENTOS


async def main():
    await cache.connect()
    if not await cache.is_available():
        print("Erro ao conectar ao Redis.")
        sys.exit(1)

    deleted = await cache.clear_pattern(f"{PREFIXO_DOCUMENTOS}:*")

    print(f"{deleted} chave(s) invalidada(s).")
    await cache.close()


if __name__ == "__main__":
    asyncio.run(main())
