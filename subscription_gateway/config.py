from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


@dataclass(frozen=True)
class CorsPolicy:
    """Cross-origin policy applied to every route."""

    allowed_origins: frozenset[str]
    credentials: bool = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=(str(Path(__file__).resolve().parents[1] / ".env"), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Subscription Gateway API", alias="APP_NAME")
    app_env: Literal["development", "staging", "production", "test"] = Field(
        default="production",
        alias="APP_ENV",
    )
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["https://shoplinno.vercel.app"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    supabase_url: Optional[str] = Field(default=None, alias="SUPABASE_URL")
    supabase_service_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("SUPABASE_SERVICE_KEY", "SUPABASE_SECRET_KEY"),
    )

    database_url: str = Field(default="sqlite:///./gateway.db", alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, ge=1, le=100, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, ge=0, le=200, alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=30, ge=1, le=300, alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=1800, ge=60, alias="DB_POOL_RECYCLE")
    init_db_on_startup: bool = Field(default=False, alias="INIT_DB_ON_STARTUP")

    unknown_plan_policy: Literal["reject", "monthly"] = Field(
        default="reject",
        alias="UNKNOWN_PLAN_POLICY",
    )
    contact_storage: Literal["messages", "contact_messages"] = Field(
        default="messages",
        alias="CONTACT_STORAGE",
    )
    enable_messages_endpoint: bool = Field(default=True, alias="ENABLE_MESSAGES_ENDPOINT")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, ge=1, le=65535, alias="PORT")
    serverless: bool = Field(
        default=False,
        validation_alias=AliasChoices("SERVERLESS", "VERCEL"),
    )

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        """Ensure the API prefix starts with a slash and has no trailing slash."""
        normalized = value.strip()
        if not normalized.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'.")
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
    def validate_database_url(cls, value: str) -> str:
        """Accept PostgreSQL (Supabase) URLs and SQLite for local runs and tests."""
        lowered = value.lower()
        if not lowered.startswith(("postgresql://", "postgresql+psycopg2://", "sqlite://")):
            raise ValueError(
                "DATABASE_URL must start with postgresql://, postgresql+psycopg2:// or sqlite://"
            )
        return value

    @field_validator("serverless", mode="before")
    @classmethod
    def parse_serverless(cls, value: object) -> object:
        # Vercel sets VERCEL=1; any value other than a false-ish flag counts.
        if isinstance(value, str):
            return value.strip().lower() not in ("", "0", "false", "no", "off")
        return value

    @property
    def cors(self) -> CorsPolicy:
        return CorsPolicy(
            allowed_origins=frozenset(self.cors_origins),
            credentials=self.cors_allow_credentials,
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
