"""Runtime configuration loaded from environment variables and .env files."""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "RuntimeSettings",
    "load_runtime_settings",
]

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class RuntimeSettings(BaseSettings):
    """Runtime configuration resolved from the process environment."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "EQUACAOPRO_API_KEY", "API_KEY", "GEMINI_API_KEY", "OPENAI_API_KEY", "api_key"
        ),
    )
    model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices("EQUACAOPRO_MODEL", "model"),
    )
    base_url: str | None = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("EQUACAOPRO_BASE_URL", "base_url"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("base_url", mode="before")
    @classmethod
    def _blank_url_uses_sdk_default(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("model", mode="before")
    @classmethod
    def _blank_model_uses_default(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MODEL
        return value

    def credential(self) -> str | None:
        """Return the plain-text API key, or ``None`` when it is not configured."""

        if self.api_key is None:
            return None
        secret = self.api_key.get_secret_value().strip()
        return secret or None


def load_runtime_settings() -> RuntimeSettings:
    """Return a fresh settings instance reflecting the current environment."""

    return RuntimeSettings()
