from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    API_TITLE: str = "API SSDA"
    API_DESCRIPTION: str = "API para solicitação e acompanhamento de documentos acadêmicos"
    API_VERSION: str = "1.0.0"
    API_PORT: int = 3333
    API_HOST: str = "0.0.0.0"
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
    ]

    # Tokens de sessão dos funcionários (JWE, chave base64url de 32 bytes)
    JWE_SECRET_KEY: str = ""
    JWE_TOKEN_TTL: int = 60 * 60 * 8

    # Configurações Redis
    REDIS_ENABLED: bool = True
    REDIS_HOST: str = "redis"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_USERNAME: str = "default"
    REDIS_PASSWORD: str = ""
    DOCUMENTOS_CACHE_TTL: int = 3600

    # Configurações PostgreSQL
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "ssda"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_URL_OVERRIDE: str = ""

    @property
    def DATABASE_URL(self) -> str:
        """Constrói a URL de conexão do PostgreSQL para asyncpg"""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


settings = Settings()
