"""Public API for shared authgate configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    AuthgateSettings,
    ErrorSettings,
    HttpSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AuthgateSettings",
    "ErrorSettings",
    "HttpSettings",
    "LoggingSettings",
    "load_settings",
]
