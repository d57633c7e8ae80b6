"""Per-request structured logging context.

Fields bound here are attached to every record by ``ContextFilter``. The
current context is an immutable snapshot; binding replaces it, so a context
copied into another task never changes underneath that task.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

from . import fields

_EMPTY: Mapping[str, str] = MappingProxyType({})
_CURRENT: ContextVar[Mapping[str, str]] = ContextVar("authgate_log_context", default=_EMPTY)


def _with(values: Mapping[str, object]) -> Mapping[str, str]:
    """Return the current snapshot extended with non-``None`` ``values``."""
    merged = dict(_CURRENT.get())
    merged.update({str(key): str(value) for key, value in values.items() if value is not None})
    return MappingProxyType(merged)


def get_context() -> dict[str, str]:
    """Return the bound fields as a plain dict."""
    return dict(_CURRENT.get())


def bind_context(**values: object) -> None:
    """Bind fields for the rest of the current execution context.

    Values are stringified; ``None`` values are skipped.
    """
    if values:
        _CURRENT.set(_with(values))


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when no names are given."""
    if not keys:
        _CURRENT.set(_EMPTY)
        return
    _CURRENT.set(
        MappingProxyType({key: value for key, value in _CURRENT.get().items() if key not in keys})
    )


@contextmanager
def log_context(values: Mapping[str, object] | None = None, **more: object) -> Iterator[None]:
    """Bind fields only while the block runs."""
    token = _CURRENT.set(_with({**(values or {}), **more}))
    try:
        yield
    finally:
        _CURRENT.reset(token)


def request_log_context(
    *, method: str, path: str, request_id: str | None = None
) -> AbstractContextManager[None]:
    """Bind the standard request correlation fields for one request."""
    return log_context(
        {fields.METHOD: method, fields.PATH: path, fields.REQUEST_ID: request_id}
    )
