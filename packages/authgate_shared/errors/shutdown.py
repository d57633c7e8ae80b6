"""Shutdown signal carried through the ordinary error path.

Any layer may return or raise a ``ShutdownSignal`` to ask the process to stop
gracefully. A supervising caller uses ``is_shutdown`` on errors it receives.
Detection is by type identity only, never by message text.
"""

from __future__ import annotations

from .wrapping import root_cause


class ShutdownSignal(Exception):
    """Marker error requesting graceful termination of the service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        """Return the human-readable shutdown reason."""
        return self.message


def new_shutdown(message: str) -> ShutdownSignal:
    """Return a shutdown signal carrying ``message``."""
    return ShutdownSignal(message=message)


def is_shutdown(err: BaseException | None) -> bool:
    """Report whether the innermost cause of ``err`` is a shutdown signal."""
    if err is None:
        return False
    return isinstance(root_cause(err), ShutdownSignal)
