# loja_api/adapters/configuration/config.py

from datetime import timedelta
from typing import Optional
from logging import getLevelName
from pydantic import PostgresDsn, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[PostgresDsn] = None
    DB_CREATE_TABLES: bool = True

    # Auth
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_CLIENTE_EXPIRE_MINUTOS: int = 60
    TOKEN_COOKIE_NAME: str = "token"

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        return PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data.get("POSTGRES_PORT", 5432),
            path=data["POSTGRES_DB"],
        )

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        getLevelName(lvl)  # valida
        return lvl

    @field_validator("ACCESS_TOKEN_CLIENTE_EXPIRE_MINUTOS")
    def validate_token_expiry(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("ACCESS_TOKEN_CLIENTE_EXPIRE_MINUTOS deve ser positivo")
        return v

    @property
    def access_token_expires(self) -> timedelta:
        """Duração do token; fonte única para o 'exp' do JWT e o max-age do cookie."""
        return timedelta(minutes=self.ACCESS_TOKEN_CLIENTE_EXPIRE_MINUTOS)

    @property
    def cookie_max_age(self) -> int:
        """Max-age do cookie em segundos, derivado de access_token_expires."""
        return int(self.access_token_expires.total_seconds())

    @property
    def async_database_url(self) -> str:
        """URL usada pelo engine assíncrono (troca o driver síncrono por asyncpg)."""
        return str(self.DATABASE_URL).replace(f"postgresql+{self.DB_DRIVER}", "postgresql+asyncpg")

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
