# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///marketplace.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class TokenConfig(BaseSettings):
    algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    ttl_seconds: int = Field(3600, ge=1, alias="TOKEN_TTL_SECONDS")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class LoggingConfig(BaseSettings):
    level: str = Field("INFO", alias="LOG_LEVEL")
    file: Path = Field(Path("instance/app.log"), alias="LOG_FILE")
    rotation: str | None = Field("10 MB", alias="LOG_ROTATION")
    retention: int | None = Field(5, ge=1, alias="LOG_RETENTION")
    json_file: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, ge=0.1, alias="RL_WINDOW")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _token_config_factory() -> TokenConfig:
    return TokenConfig()  # type: ignore[call-arg]


def _logging_config_factory() -> LoggingConfig:
    return LoggingConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


_INSECURE_SECRETS = frozenset({"", "dev", "development", "test", "secret", "changeme"})
_MIN_SECRET_LENGTH = 32


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", validation_alias=AliasChoices("JWT_SECRET", "SECRET_KEY"))
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    token: TokenConfig = Field(default_factory=_token_config_factory)
    logging: LoggingConfig = Field(default_factory=_logging_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key.lower() in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: JWT_SECRET/SECRET_KEY is a development placeholder.\n"
                "   Every bearer token would be forgeable. Set a random value of at least\n"
                f"   {_MIN_SECRET_LENGTH} characters before starting in production.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if len(self.secret_key) < _MIN_SECRET_LENGTH:
            warnings.append(f"⚠️  token secret is shorter than {_MIN_SECRET_LENGTH} characters")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS accepts any origin for /api/*")
        if not self.security.enable_rate_limit:
            warnings.append("⚠️  login/register rate limiting is disabled")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is disabled")

        for warning in warnings:
            print(f"PRODUCTION CONFIG: {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["AppConfig", "load_config"]
