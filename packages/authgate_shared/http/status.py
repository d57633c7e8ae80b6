"""Registry of HTTP status overrides keyed by public error code."""

from __future__ import annotations

import threading
from typing import Mapping

from packages.authgate_shared.config import HttpSettings
from packages.authgate_shared.errors import Disclosable


class StatusRegistry:
    """Operator-configured public code to HTTP status overrides.

    Populate once at startup and read while serving. Writes swap in a new
    mapping under a lock, so lookups never observe a half-applied update.
    """

    def __init__(self, overrides: Mapping[str, int] | None = None) -> None:
        self._lock = threading.Lock()
        self._codes: dict[str, int] = dict(overrides or {})

    @classmethod
    def from_settings(cls, settings: HttpSettings) -> StatusRegistry:
        """Build a registry seeded with configured status overrides."""
        return cls(settings.status_overrides)

    def register(self, error: str | Disclosable, status: int) -> None:
        """Map a public code, or the code of ``error``, to ``status``.

        Any prior status for the code is overwritten. The status range is
        not validated.
        """
        code = error if isinstance(error, str) else error.public()
        with self._lock:
            updated = dict(self._codes)
            updated[code] = status
            self._codes = updated

    def lookup(self, code: str) -> int | None:
        """Return the override for ``code``, or ``None`` when unset."""
        return self._codes.get(code)

    def snapshot(self) -> dict[str, int]:
        """Return a copy of every registered override."""
        return dict(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)
