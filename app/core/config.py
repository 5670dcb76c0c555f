"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Postgres: when unset the API still starts, but every store-backed route answers 503.
    DATABASE_URL: str | None = None
    DB_STATEMENT_TIMEOUT_MS: int = 5000

    # Token signing key has no default: startup fails without it.
    SECRET: SecretStr
    TOKEN_EXP: int = 24
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "aircraft-system"
    AUTH_COOKIE_NAME: str = "auth_token"
    # Secure + SameSite=None for cross-origin HTTPS frontends; disable for plain-http local dev.
    COOKIE_SECURE: bool = True

    BCRYPT_ROUNDS: int = 12

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL URL (e.g. postgresql:// or postgresql+psycopg2://)"
            )
        return v.strip()

    @field_validator("DB_STATEMENT_TIMEOUT_MS")
    @classmethod
    def validate_statement_timeout(cls, v: int) -> int:
        if v < 100 or v > 60000:
            raise ValueError("DB_STATEMENT_TIMEOUT_MS must be between 100 and 60000")
        return v

    @field_validator("SECRET")
    @classmethod
    def validate_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("SECRET must be set and non-empty")
        return v

    @field_validator("TOKEN_EXP")
    @classmethod
    def validate_token_exp(cls, v: int) -> int:
        if v < 1 or v > 720:
            raise ValueError("TOKEN_EXP must be between 1 and 720 hours (30 days)")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
