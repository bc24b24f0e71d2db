"""Configuration for the AIR MCP server.

Settings are read from the environment (and a local ``.env`` file when
present) into a frozen Pydantic model.
"""

from __future__ import annotations

import os
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "localhost"
DEFAULT_TIMEOUT_SECONDS = 30.0

MISSING_TOKEN_MESSAGE = (
    "AIR_API_TOKEN not provided. Please configure the MCP server with a valid "
    "airApiToken to execute tools."
)


class MissingAPITokenError(Exception):
    """Raised when a tool is invoked without an AIR API token configured."""

    def __init__(self, message: str = MISSING_TOKEN_MESSAGE):
        super().__init__(message)
        self.message = message


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if not value:
        return default
    return value in {"1", "true", "yes", "on"}


class AIRConfig(BaseModel):
    """Connection and runtime settings for the AIR API."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    host: str = Field(
        default=DEFAULT_HOST,
        description="AIR console host, with or without scheme",
    )
    api_token: str = Field(
        default="",
        repr=False,
        description="Bearer token for the AIR public API",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify the AIR console TLS certificate",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer used on stderr",
    )

    @field_validator("host")
    @classmethod
    def normalize_host(cls, v: str) -> str:
        """Strip trailing slashes and default to https when no scheme is given."""
        v = v.strip().rstrip("/")
        if not v:
            v = DEFAULT_HOST
        if "://" not in v:
            v = f"https://{v}"
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @property
    def base_url(self) -> str:
        """Base URL all API paths are resolved against."""
        return self.host

    @property
    def has_token(self) -> bool:
        return bool(self.api_token.strip())

    def require_token(self) -> None:
        """Raise MissingAPITokenError if no API token is configured."""
        if not self.has_token:
            raise MissingAPITokenError()

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> AIRConfig:
        """Build a config from AIR_* environment variables."""
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        timeout_raw = os.environ.get("AIR_TIMEOUT", "").strip()
        log_format = os.environ.get("AIR_LOG_FORMAT", "console").strip().lower()

        return cls(
            host=os.environ.get("AIR_HOST", DEFAULT_HOST),
            api_token=os.environ.get("AIR_API_TOKEN", ""),
            timeout=timeout_raw or DEFAULT_TIMEOUT_SECONDS,
            verify_ssl=_env_flag("AIR_VERIFY_SSL", True),
            log_level=os.environ.get("AIR_LOG_LEVEL", "INFO"),
            log_format="json" if log_format == "json" else "console",
        )
