"""Error annotation helpers and cause-chain traversal."""

from __future__ import annotations

from typing import Callable


class WrappedError(Exception):
    """Annotate one underlying error with caller context.

    The wrapped error stays reachable through ``unwrap()`` and ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"

    def unwrap(self) -> BaseException:
        """Return the annotated error."""
        return self.cause


def wrapper(prefix: str) -> Callable[[BaseException, str], WrappedError]:
    """Return a ``wrap(cause, message)`` helper that tags messages with ``prefix``."""

    def wrap(cause: BaseException, message: str) -> WrappedError:
        return WrappedError(f"{prefix}: {message}", cause)

    return wrap


def unwrap_once(err: BaseException) -> BaseException | None:
    """Return the direct cause of ``err``, or ``None`` at the end of the chain.

    An explicit ``unwrap()`` method wins over ``__cause__``. The implicit
    ``__context__`` is not a cause and is never followed.
    """
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        inner = unwrap()
        if isinstance(inner, BaseException):
            return inner
    return err.__cause__


def root_cause(err: BaseException) -> BaseException:
    """Walk the cause chain of ``err`` to its innermost error."""
    seen = {id(err)}
    current = err
    while True:
        inner = unwrap_once(current)
        if inner is None or id(inner) in seen:
            return current
        seen.add(id(inner))
        current = inner
