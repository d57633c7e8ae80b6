"""Disclosable error types for the authgate error taxonomy.

An error is *disclosable* when it can produce a public code: a short, stable
token that is safe to show to callers. Everything else is *opaque* and is
always reported as an internal failure.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import ClassVar, Protocol, runtime_checkable

from . import codes
from .codec import decode_code, encode_code


@runtime_checkable
class Disclosable(Protocol):
    """Capability of errors exposing a public code."""

    def public(self) -> str:
        """Return the public code for this error."""


class PublicError(Exception):
    """Structured disclosable error carrying its code beside the message."""

    def __init__(self, code: str, message: str) -> None:
        if not code:
            raise ValueError("public error code must not be empty")
        super().__init__(code, message)
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message

    def public(self) -> str:
        """Return the public code."""
        return self.code

    def encode(self, prefix: str) -> str:
        """Render this error in the ``"<prefix>: <code>, <message>"`` form."""
        return encode_code(prefix, self.code, self.message)


class EncodedError(Exception):
    """Disclosable error whose public code is embedded in its text.

    Subclasses set ``prefix`` and may set ``default_text`` so well-known
    errors can be raised without repeating their text::

        class NotFoundError(ControllerError):
            default_text = "handlers: not_found, resource not found"
    """

    prefix: ClassVar[str] = ""
    default_text: ClassVar[str | None] = None

    def __init__(self, text: str | None = None) -> None:
        resolved = text if text is not None else self.default_text
        if resolved is None:
            raise TypeError(f"{type(self).__name__} requires error text")
        super().__init__(resolved)
        self.text = resolved

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_code(cls, code: str, message: str) -> EncodedError:
        """Build an instance from a public code and human message."""
        return cls(encode_code(cls.prefix, code, message))

    def public(self) -> str:
        """Decode and return the public code.

        Raises:
            ErrorCodeDecodeError: The error text is malformed.
        """
        return decode_code(self.prefix, self.text)


class FieldValidationError(Exception, Mapping[str, Disclosable]):
    """Simultaneous per-field failures, keyed by field name."""

    def __init__(self, fields: Mapping[str, Disclosable]) -> None:
        for name, error in fields.items():
            if not isinstance(name, str):
                raise TypeError(f"field name must be a string: {name!r}")
            if not isinstance(error, Disclosable):
                raise TypeError(f"field {name!r} error is not disclosable: {error!r}")
        self._fields: dict[str, Disclosable] = dict(fields)
        super().__init__(f"validation failed: {', '.join(sorted(self._fields))}")

    # Identity semantics like any other exception, not mapping equality.
    __eq__ = Exception.__eq__
    __hash__ = Exception.__hash__

    def __getitem__(self, name: str) -> Disclosable:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def public(self) -> str:
        """Return the shared validation public code."""
        return codes.VALIDATION_ERROR
