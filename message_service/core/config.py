"""Application configuration powered by pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from message_service.core.errors import MissingConfigurationError

# Dotted configuration keys for fields that have one.
CONFIG_KEYS = {
    "APPLICATION_MESSAGE": "application.message",
}

# Level names understood by both logging (once uvicorn registers TRACE) and uvicorn.
LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Strongly-typed, read-only configuration loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    PROJECT_NAME: str = "Message Service"
    PROJECT_VERSION: str = "1.0.0"

    APPLICATION_MESSAGE: str = Field(..., description="Value of `application.message`, served verbatim on GET /")

    HOST: str = "0.0.0.0"
    PORT: int = Field(8080, ge=0, le=65535)
    LOG_LEVEL: LogLevel = "info"

    @field_validator("APPLICATION_MESSAGE")
    @classmethod
    def _message_must_encode_as_utf8(cls, value: str) -> str:
        """Reject values holding undecodable bytes (surrogate escapes from a non-UTF-8 environment)."""
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(
                f"application.message is not valid UTF-8 (undecodable byte at position {exc.start})"
            ) from None
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_settings(env_file: str | None = ".env", **overrides) -> Settings:
    """Build a fresh Settings instance, failing fast on missing required keys.

    `env_file=None` disables `.env` loading entirely. Keyword overrides take
    priority over the environment.
    """

    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as exc:
        missing = [
            str(error["loc"][0])
            for error in exc.errors()
            if error["type"] == "missing" and error["loc"]
        ]
        if not missing:
            raise
        raise MissingConfigurationError(
            keys=tuple(CONFIG_KEYS.get(name, name) for name in missing),
            env_names=tuple(missing),
        ) from exc


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return load_settings()
