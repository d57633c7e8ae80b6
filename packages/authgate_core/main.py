"""Process entrypoint for the authgate HTTP service."""

from __future__ import annotations

import os
import signal
import threading
from pathlib import Path

from packages.authgate_shared.config import AuthgateSettings, load_settings
from packages.authgate_shared.http import build_server
from packages.authgate_shared.logging import configure_logging, get_logger

from .app import build_app
from .supervisor import ShutdownSupervisor

_LOGGER = get_logger(__name__)
_POLL_SECONDS = 1.0


def _install_signal_handlers(supervisor: ShutdownSupervisor) -> None:
    """Translate SIGINT/SIGTERM into graceful shutdown requests."""

    def _handle(signum: int, _frame: object) -> None:
        supervisor.request_shutdown(signal.Signals(signum).name)

    signal.signal(signal.SIGINT, _handle)
    signal.signal(signal.SIGTERM, _handle)


def serve(settings: AuthgateSettings, supervisor: ShutdownSupervisor) -> None:
    """Serve until the supervisor reports a shutdown request."""
    app = build_app(settings, supervisor=supervisor)
    server = build_server(
        app,
        host=settings.http.host,
        port=settings.http.port,
        log_level=settings.http.log_level,
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    _LOGGER.info(
        "authgate HTTP runtime started",
        extra={"host": settings.http.host, "port": settings.http.port},
    )
    try:
        while not supervisor.wait(_POLL_SECONDS):
            if not thread.is_alive():
                supervisor.request_shutdown("http runtime exited")
    finally:
        server.should_exit = True
        thread.join(timeout=5.0)
        _LOGGER.info(
            "authgate HTTP runtime stopped", extra={"reason": supervisor.reason}
        )


def main() -> None:
    """Load settings, configure logging and serve until shutdown."""
    config_path = os.getenv("AUTHGATE_CONFIG_FILE", "").strip()
    settings = load_settings(config_path=Path(config_path) if config_path else None)
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
    supervisor = ShutdownSupervisor()
    _install_signal_handlers(supervisor)
    serve(settings, supervisor)


if __name__ == "__main__":
    main()
