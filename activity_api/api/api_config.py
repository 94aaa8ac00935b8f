# This file defines runtime settings for the API layer in one place.
# It exists so the admin secret, database location, log limits, and CORS origins can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# Required values fail fast at load time instead of surfacing as confusing request errors later.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = ("http://localhost:3000",)


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "activity-api"
    host: str = "0.0.0.0"
    port: int = 8000
    environment: str = "local"
    database_url: str
    admin_token: str
    admin_token_header: str = "x-admin-token"
    log_level: str = "INFO"
    log_default_limit: int = 10
    log_max_limit: int = 10
    allowed_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    allowed_origin_regex: str | None = None
    create_schema_on_startup: bool = False
    app_version: str = "0.1.0"

    @field_validator("admin_token")
    @classmethod
    def validate_admin_token(cls, value: str) -> str:
        if not value:
            raise ValueError("admin_token must not be empty.")
        return value

    @field_validator("log_default_limit", "log_max_limit")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("admin_token_header")
    @classmethod
    def validate_header_name(cls, value: str) -> str:
        return value.strip().lower()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "activity-api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8000),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "admin_token": os.getenv("ADMIN_TOKEN", ""),
        "admin_token_header": os.getenv("ADMIN_TOKEN_HEADER", "x-admin-token"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_default_limit": _env_int("API_LOG_DEFAULT_LIMIT", 10),
        "log_max_limit": _env_int("API_LOG_MAX_LIMIT", 10),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", list(DEFAULT_ALLOWED_ORIGINS)),
        "allowed_origin_regex": os.getenv("API_ALLOWED_ORIGIN_REGEX") or None,
        "create_schema_on_startup": _env_bool("API_CREATE_SCHEMA_ON_STARTUP", False),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")
    if not config_values["admin_token"]:
        raise RuntimeError("ADMIN_TOKEN is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
