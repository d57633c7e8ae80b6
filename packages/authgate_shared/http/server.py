"""FastAPI and uvicorn helpers for serving rendered error responses."""

from __future__ import annotations

from typing import Any, Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from packages.authgate_shared.errors import is_shutdown
from packages.authgate_shared.logging import fields, get_logger, request_log_context

from .render import ErrorRenderer

_LOGGER = get_logger(__name__)

ShutdownObserver = Callable[[BaseException], object]

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(*, title: str = "authgate", version: str = "0.0.0") -> FastAPI:
    """Create a FastAPI app with project defaults."""
    return FastAPI(title=title, version=version)


def build_server(
    app: FastAPI,
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
    log_level: str = "info",
) -> uvicorn.Server:
    """Build a uvicorn server for ``app`` without starting it."""
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level)
    return uvicorn.Server(config)


def json_response(document: dict[str, Any], status: int) -> JSONResponse:
    """Serialize one error document as a JSON response."""
    return JSONResponse(status_code=status, content=document)


class ErrorRenderingMiddleware(BaseHTTPMiddleware):
    """Answer exceptions escaping route handlers with rendered error documents.

    Shutdown signals are handed to ``on_shutdown`` and still reach the caller
    only as an opaque ``server_error``.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        renderer: ErrorRenderer,
        on_shutdown: ShutdownObserver | None = None,
    ) -> None:
        super().__init__(app)
        self._renderer = renderer
        self._on_shutdown = on_shutdown

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            with request_log_context(
                method=request.method,
                path=request.url.path,
                request_id=request.headers.get(REQUEST_ID_HEADER),
            ):
                return self._handle(exc)

    def _handle(self, exc: Exception) -> Response:
        if is_shutdown(exc):
            _LOGGER.warning("shutdown requested by request handler")
            if self._on_shutdown is not None:
                self._on_shutdown(exc)

        rendered = self._renderer.render(exc)
        extra = {
            fields.ERROR_TYPE: type(exc).__name__,
            fields.PUBLIC_CODE: rendered.document["error"],
            fields.STATUS: rendered.status,
        }
        if rendered.status >= 500:
            _LOGGER.error("request failed", exc_info=exc, extra=extra)
        else:
            _LOGGER.info("request rejected", extra=extra)
        return json_response(rendered.document, rendered.status)


def install_error_handlers(
    app: FastAPI,
    *,
    renderer: ErrorRenderer,
    on_shutdown: ShutdownObserver | None = None,
) -> None:
    """Render every exception raised by ``app`` routes through ``renderer``."""
    app.add_middleware(ErrorRenderingMiddleware, renderer=renderer, on_shutdown=on_shutdown)
