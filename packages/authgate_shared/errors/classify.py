"""One-shot classification of arbitrary errors into the public taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from packages.authgate_shared.logging import fields as log_fields
from packages.authgate_shared.logging import get_logger

from .codec import ErrorCodeDecodeError
from .predicates import as_disclosable, as_validation_aggregate
from .types import Disclosable

_LOGGER = get_logger(__name__)


class ErrorKind(str, Enum):
    """How much of an error may be shown to a caller."""

    OPAQUE = "opaque"
    DISCLOSABLE = "disclosable"
    VALIDATION = "validation"


@dataclass(frozen=True)
class ErrorClassification:
    """Public view of one error.

    ``code`` is set for disclosable errors. ``fields`` is set for validation
    aggregates, which may or may not carry a code of their own.
    """

    kind: ErrorKind
    code: str | None = None
    fields: Mapping[str, str] | None = field(default=None)


OPAQUE = ErrorClassification(kind=ErrorKind.OPAQUE)


def classify(err: object, *, strict: bool = False) -> ErrorClassification:
    """Classify ``err`` once so renderers never repeat capability checks.

    A malformed encoded error, or a ``public`` that fails or returns something
    other than a non-empty string, is a defect in the code that produced the
    error. It is logged and the error is treated as opaque, or re-raised when
    ``strict``.
    """
    try:
        code = _public_code(err)
        fields = _field_codes(err)
    except Exception as exc:
        if strict:
            raise
        extra = {log_fields.ERROR_TYPE: type(err).__name__}
        if isinstance(exc, ErrorCodeDecodeError):
            extra["encoded"] = exc.encoded
            message = "malformed public error code"
        else:
            message = "public error code unavailable"
        _LOGGER.error(message, exc_info=exc, extra=extra)
        return OPAQUE

    if fields is not None:
        return ErrorClassification(kind=ErrorKind.VALIDATION, code=code, fields=fields)
    if code is not None:
        return ErrorClassification(kind=ErrorKind.DISCLOSABLE, code=code)
    return OPAQUE


def _checked_code(error: Disclosable) -> str:
    """Call ``public()`` and insist on a non-empty string."""
    code = error.public()
    if not isinstance(code, str) or not code:
        raise TypeError(f"public() returned {code!r} for {type(error).__name__}")
    return code


def _public_code(err: object) -> str | None:
    """Return the public code of ``err`` when it is disclosable."""
    disclosable = as_disclosable(err)
    if disclosable is None:
        return None
    return _checked_code(disclosable)


def _field_codes(err: object) -> dict[str, str] | None:
    """Return field name to public code pairs when ``err`` is an aggregate."""
    aggregate = as_validation_aggregate(err)
    if aggregate is None:
        return None
    return {name: _checked_code(error) for name, error in aggregate.items()}
