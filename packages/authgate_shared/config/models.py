"""Typed configuration models for authgate runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "authgate" / "authgate.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: LogLevel = "INFO"
    json_output: bool = True
    service: str = "authgate"
    environment: str = "dev"


class HttpSettings(BaseModel):
    """HTTP serving settings and public code status overrides."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)
    log_level: str = "info"
    # Public code -> HTTP status. Range is the operator's responsibility.
    status_overrides: dict[str, int] = Field(default_factory=dict)


class ErrorSettings(BaseModel):
    """Error classification behavior."""

    strict_codes: bool = False


class AuthgateSettings(BaseModel):
    """Root runtime settings, resolved by ``load_settings`` from CLI/env/yaml."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    errors: ErrorSettings = Field(default_factory=ErrorSettings)
