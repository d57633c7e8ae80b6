"""Codec for public error codes embedded in error text.

An encoded error reads ``"<prefix>: <code>, <human message>"``. The public code
is everything between the ``"<prefix>: "`` delimiter and the first comma.
"""

from __future__ import annotations

DELIMITER = ": "
_SEPARATOR = ","


class ErrorCodeDecodeError(ValueError):
    """Encoded error text does not follow the public code convention."""

    def __init__(self, *, prefix: str, encoded: str, reason: str) -> None:
        super().__init__(f"cannot decode public code ({reason}): {encoded!r}")
        self.prefix = prefix
        self.encoded = encoded
        self.reason = reason


def encode_code(prefix: str, code: str, message: str) -> str:
    """Return ``"<prefix>: <code>, <message>"``.

    Raises:
        ValueError: ``code`` is empty or contains a comma, or ``prefix``
            contains the delimiter. Either would produce unparsable text.
    """
    if DELIMITER in prefix:
        raise ValueError(f"prefix must not contain {DELIMITER!r}: {prefix!r}")
    if not code:
        raise ValueError("code must not be empty")
    if _SEPARATOR in code:
        raise ValueError(f"code must not contain {_SEPARATOR!r}: {code!r}")
    return f"{prefix}{DELIMITER}{code}{_SEPARATOR} {message}"


def decode_code(prefix: str, encoded: str) -> str:
    """Extract the public code from ``encoded``.

    Raises:
        ErrorCodeDecodeError: ``encoded`` does not start with the prefix and
            delimiter, has no comma after them, or carries an empty code.
    """
    head = f"{prefix}{DELIMITER}"
    if not encoded.startswith(head):
        raise ErrorCodeDecodeError(
            prefix=prefix, encoded=encoded, reason=f"missing prefix {head!r}"
        )

    remainder = encoded[len(head) :]
    code, separator, _ = remainder.partition(_SEPARATOR)
    if not separator:
        raise ErrorCodeDecodeError(
            prefix=prefix, encoded=encoded, reason="missing comma after code"
        )
    if not code:
        raise ErrorCodeDecodeError(prefix=prefix, encoded=encoded, reason="empty code")
    return code
