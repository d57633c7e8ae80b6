"""Tests for the public error code codec."""

from __future__ import annotations

import pytest

from packages.authgate_shared.errors import ErrorCodeDecodeError, decode_code, encode_code


def test_encode_code_uses_prefix_code_message_convention() -> None:
    """encode_code should join prefix, code and message with the fixed delimiters."""
    assert (
        encode_code("handlers", "not_found", "resource not found")
        == "handlers: not_found, resource not found"
    )


@pytest.mark.parametrize(
    ("prefix", "code", "message"),
    [
        ("handlers", "not_found", "resource not found"),
        ("models", "invalid_parse", "contents, with commas, everywhere"),
        ("", "bare", ""),
        ("svc.auth", "token:expired", "token expired: refresh it"),
    ],
)
def test_decode_code_recovers_encoded_code(prefix: str, code: str, message: str) -> None:
    """decode_code should invert encode_code for every valid input."""
    assert decode_code(prefix, encode_code(prefix, code, message)) == code


@pytest.mark.parametrize(
    ("prefix", "code"),
    [
        ("handlers", "not,found"),
        ("handlers", ""),
        ("bad: prefix", "code"),
    ],
)
def test_encode_code_rejects_unparsable_inputs(prefix: str, code: str) -> None:
    """encode_code should fail loudly instead of producing unparsable text."""
    with pytest.raises(ValueError):
        encode_code(prefix, code, "message")


@pytest.mark.parametrize(
    "encoded",
    [
        "",
        "hand",
        "models: not_found, resource not found",
        "handlers:not_found, missing space",
        "handlers: not_found without comma",
        "handlers: , empty code",
    ],
)
def test_decode_code_raises_decode_error_for_malformed_text(encoded: str) -> None:
    """decode_code should report malformed text explicitly instead of crashing."""
    with pytest.raises(ErrorCodeDecodeError) as exc_info:
        decode_code("handlers", encoded)

    assert exc_info.value.prefix == "handlers"
    assert exc_info.value.encoded == encoded
    assert isinstance(exc_info.value, ValueError)
