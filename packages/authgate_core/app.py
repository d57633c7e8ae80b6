"""Assemble the authgate FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from packages.authgate_shared.config import AuthgateSettings
from packages.authgate_shared.http import (
    ErrorRenderer,
    StatusRegistry,
    create_app,
    install_error_handlers,
)

from .handlers import ContentTypeNotAcceptedError, NotFoundError
from .supervisor import ShutdownSupervisor

_CATALOG_STATUSES = (
    (NotFoundError(), 404),
    (ContentTypeNotAcceptedError(), 415),
)


def build_registry(settings: AuthgateSettings) -> StatusRegistry:
    """Seed configured overrides, then fill catalog defaults for unset codes."""
    registry = StatusRegistry.from_settings(settings.http)
    for error, status in _CATALOG_STATUSES:
        if error.public() not in registry:
            registry.register(error, status)
    return registry


def build_app(
    settings: AuthgateSettings,
    *,
    supervisor: ShutdownSupervisor,
    registry: StatusRegistry | None = None,
) -> FastAPI:
    """Create the app with error rendering and shutdown observation wired in."""
    app = create_app(title="authgate")
    renderer = ErrorRenderer(
        registry if registry is not None else build_registry(settings),
        strict=settings.errors.strict_codes,
    )
    install_error_handlers(app, renderer=renderer, on_shutdown=supervisor.observe)
    app.state.renderer = renderer
    app.state.supervisor = supervisor

    @app.get("/healthz")
    async def healthz() -> dict[str, bool]:
        return {"ok": not supervisor.requested}

    return app
