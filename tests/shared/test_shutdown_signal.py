"""Tests for shutdown signal creation, wrapping and detection."""

from __future__ import annotations

import copy
import pickle

import pytest

from packages.authgate_shared.errors import (
    ShutdownSignal,
    WrappedError,
    is_shutdown,
    new_shutdown,
    root_cause,
    wrapper,
)
from packages.authgate_shared.logging import log_context

wrap = wrapper("tests")


def test_is_shutdown_detects_bare_signal() -> None:
    """A fresh shutdown signal should be detected."""
    signal = new_shutdown("bye")

    assert isinstance(signal, ShutdownSignal)
    assert str(signal) == "bye"
    assert is_shutdown(signal) is True


def test_is_shutdown_ignores_message_content() -> None:
    """Ordinary errors with identical text must not be treated as shutdown."""
    assert is_shutdown(RuntimeError("bye")) is False
    assert is_shutdown(None) is False


@pytest.mark.parametrize("depth", [1, 2, 5, 50])
def test_is_shutdown_unwraps_any_number_of_layers(depth: int) -> None:
    """Detection should walk wrapped errors down to the original signal."""
    err: BaseException = new_shutdown("bye")
    for index in range(depth):
        err = wrap(err, f"layer {index}")

    assert isinstance(err, WrappedError)
    assert is_shutdown(err) is True


def test_is_shutdown_follows_explicit_exception_chaining() -> None:
    """``raise ... from signal`` should count as wrapping."""
    try:
        try:
            raise new_shutdown("bye")
        except ShutdownSignal as exc:
            raise RuntimeError("handler failed") from exc
    except RuntimeError as outer:
        assert is_shutdown(outer) is True


def test_is_shutdown_ignores_implicit_exception_context() -> None:
    """An error raised while handling a signal is not caused by it."""
    try:
        try:
            raise new_shutdown("bye")
        except ShutdownSignal:
            raise RuntimeError("cleanup failed")
    except RuntimeError as outer:
        assert outer.__context__ is not None
        assert is_shutdown(outer) is False


def test_is_shutdown_uses_innermost_cause_only() -> None:
    """A signal that itself wraps another cause is not the innermost error."""
    inner = RuntimeError("disk full")
    try:
        raise new_shutdown("bye") from inner
    except ShutdownSignal as signal:
        assert root_cause(signal) is inner
        assert is_shutdown(signal) is False


def test_root_cause_terminates_on_cycles() -> None:
    """Cause cycles should not loop forever."""
    first = RuntimeError("first")
    second = RuntimeError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert root_cause(first) is second


def test_wrapper_prefixes_message_and_keeps_cause() -> None:
    """wrap should annotate the message and expose the cause."""
    cause = ValueError("bad value")
    wrapped = wrap(cause, "parse body")

    assert str(wrapped) == "tests: parse body: bad value"
    assert wrapped.unwrap() is cause
    assert wrapped.__cause__ is cause


def test_shutdown_signal_passes_through_context_managers() -> None:
    """A signal raised inside a generator context manager should stay intact."""
    with pytest.raises(ShutdownSignal) as caught:
        with log_context({"path": "/token"}):
            raise new_shutdown("bye")

    assert is_shutdown(caught.value) is True
    assert caught.value.message == "bye"
    assert caught.value.__traceback__ is not None


def test_shutdown_signal_survives_copy_and_pickle() -> None:
    """Copies of a signal should keep their type and message."""
    signal = new_shutdown("bye")

    for clone in (copy.copy(signal), pickle.loads(pickle.dumps(signal))):
        assert isinstance(clone, ShutdownSignal)
        assert str(clone) == "bye"
        assert is_shutdown(clone) is True
