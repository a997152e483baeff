import logging
import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env for local dev; deployments use real env vars
load_dotenv(override=False)


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def _norm_prefix(prefix: str | None) -> str:
    """
    Normalize an API prefix to ``/segment`` form without a trailing slash.
    An empty value mounts the routes at the root.
    """
    if not prefix:
        return ""
    prefix = "/" + prefix.strip().strip("/")
    return "" if prefix == "/" else prefix


class Config(BaseSettings):
    """
    Engine configuration loaded from environment variables.
    Uses pydantic for validation and parsing.
    """

    ENGINE_SEED: int | None = Field(
        None, description="Default shuffle seed; unset keeps exercise order random"
    )
    CATALOG_PATH: str | None = Field(None, description="Alternative exercise catalog JSON")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    API_PREFIX: str = Field("/api/v1", description="Prefix for the HTTP routes")
    ALLOWED_ORIGINS: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        description="Comma separated CORS origins of the presentation layer",
    )

    # Feature flags
    FF_TRACE_LOGGING: bool = Field(
        default_factory=lambda: _bool("FF_TRACE_LOGGING", False),
        description="Mirror inference trace entries to the Python logger",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("API_PREFIX", mode="before")
    @classmethod
    def validate_api_prefix(cls, v):
        return _norm_prefix(v)

    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
