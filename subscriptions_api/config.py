from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=(str(Path(__file__).resolve().parents[1] / ".env"), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    app_name: str = Field(default="Subscription Service API", alias="APP_NAME")
    app_env: Literal["development", "staging", "production", "test"] = Field(
        default="production",
        alias="APP_ENV",
    )
    app_debug: bool = Field(default=False, alias="APP_DEBUG")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    api_v1_prefix: str = Field(default="/api/v1", alias="API_V1_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        alias="CORS_ORIGINS",
    )

    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, ge=1, le=65535, alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), alias="DB_PASSWORD")
    db_name: str = Field(default="subscriptions", alias="DB_NAME")
    db_sslmode: str = Field(default="disable", alias="DB_SSLMODE")

    db_pool_size: int = Field(default=10, ge=1, le=100, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, ge=0, le=200, alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=30, ge=1, le=300, alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=1800, ge=60, alias="DB_POOL_RECYCLE")
    db_connect_timeout: int = Field(default=10, ge=1, le=60, alias="DB_CONNECT_TIMEOUT")

    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=8080, ge=1, le=65535, alias="SERVER_PORT")

    @field_validator("api_v1_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        """Ensure the API prefix starts with a slash and has no trailing slash."""
        normalized = value.strip()
        if not normalized.startswith("/"):
            raise ValueError("API_V1_PREFIX must start with '/'.")
        if len(normalized) > 1 and normalized.endswith("/"):
            normalized = normalized.rstrip("/")
        return normalized

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: str | list[str]) -> list[str]:
        """Support comma-separated CORS origins from environment variables."""
        if isinstance(value, str):
            if not value.strip():
                return []
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: Optional[str]) -> Optional[str]:
        """Validate database URL is a PostgreSQL or SQLite SQLAlchemy connection string."""
        if value is None or not value.strip():
            return None
        lowered = value.lower()
        if not lowered.startswith(("postgresql://", "postgresql+psycopg2://", "sqlite://")):
            raise ValueError(
                "DATABASE_URL must start with postgresql://, postgresql+psycopg2:// or sqlite://"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL: {value}")
        return normalized

    @property
    def sqlalchemy_url(self) -> str | URL:
        """DATABASE_URL when set, otherwise a PostgreSQL URL built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password.get_secret_value(),
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode},
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()


settings: Settings = get_settings()
