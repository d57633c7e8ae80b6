"""Public HTTP error rendering API for authgate services."""

from .render import (
    DEFAULT_DISCLOSABLE_STATUS,
    DEFAULT_OPAQUE_STATUS,
    ErrorRenderer,
    RenderedError,
    ResponseWriter,
)
from .server import (
    ErrorRenderingMiddleware,
    build_server,
    create_app,
    install_error_handlers,
    json_response,
)
from .status import StatusRegistry

__all__ = [
    "DEFAULT_DISCLOSABLE_STATUS",
    "DEFAULT_OPAQUE_STATUS",
    "ErrorRenderer",
    "ErrorRenderingMiddleware",
    "RenderedError",
    "ResponseWriter",
    "StatusRegistry",
    "build_server",
    "create_app",
    "install_error_handlers",
    "json_response",
]
