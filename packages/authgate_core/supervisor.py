"""Process-level reaction to shutdown signals travelling the error path."""

from __future__ import annotations

import threading

from packages.authgate_shared.errors import is_shutdown
from packages.authgate_shared.logging import get_logger

_LOGGER = get_logger(__name__)


class ShutdownSupervisor:
    """Collect shutdown requests from errors and OS signals."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: str | None = None

    @property
    def requested(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """First reason given for shutdown, if any."""
        return self._reason

    def request_shutdown(self, reason: str) -> None:
        """Request graceful shutdown; only the first reason is kept."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
        _LOGGER.info("graceful shutdown requested", extra={"reason": reason})

    def observe(self, err: BaseException | None) -> bool:
        """Request shutdown when ``err`` carries a shutdown signal."""
        if not is_shutdown(err):
            return False
        self.request_shutdown(str(err))
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until shutdown is requested or ``timeout`` elapses."""
        return self._event.wait(timeout)
