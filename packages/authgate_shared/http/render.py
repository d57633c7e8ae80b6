"""Render classified errors into JSON error documents and HTTP statuses.

Document shape::

    {"error": "<public code or server_error>", "fields": {"<field>": "<code>"}}

``fields`` is present only for validation aggregates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from packages.authgate_shared.errors import ErrorClassification, classify, codes

from .status import StatusRegistry

DEFAULT_DISCLOSABLE_STATUS = 400
DEFAULT_OPAQUE_STATUS = 500

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ResponseWriter(Protocol[T_co]):
    """Collaborator that serializes and writes one error response."""

    def __call__(self, document: dict[str, Any], status: int) -> T_co:
        """Write ``document`` with HTTP ``status``."""


@dataclass(frozen=True)
class RenderedError:
    """One rendered error response."""

    document: dict[str, Any]
    status: int


class ErrorRenderer:
    """Turn arbitrary errors into public JSON documents and statuses.

    Disclosable errors default to 400 and opaque errors to 500. The status
    registry overrides the default for a public code. For validation
    aggregates the highest override among the field codes wins, so the
    result never depends on field order.
    """

    def __init__(self, registry: StatusRegistry, *, strict: bool = False) -> None:
        self._registry = registry
        self._strict = strict

    @property
    def registry(self) -> StatusRegistry:
        return self._registry

    def render(self, err: object) -> RenderedError:
        """Render ``err`` into a fresh document and status."""
        return self.render_classification(classify(err, strict=self._strict))

    def render_classification(self, classification: ErrorClassification) -> RenderedError:
        """Render an already classified error."""
        status = DEFAULT_OPAQUE_STATUS
        document: dict[str, Any] = {"error": codes.SERVER_ERROR}

        if classification.code is not None:
            document["error"] = classification.code
            override = self._registry.lookup(classification.code)
            status = override if override is not None else DEFAULT_DISCLOSABLE_STATUS

        if classification.fields is not None:
            document["fields"] = dict(classification.fields)
            field_overrides = [
                override
                for override in map(self._registry.lookup, classification.fields.values())
                if override is not None
            ]
            if field_overrides:
                status = max(field_overrides)

        return RenderedError(document=document, status=status)

    def respond(self, err: object, writer: ResponseWriter[T]) -> T:
        """Render ``err`` and hand the result to ``writer``."""
        rendered = self.render(err)
        return writer(rendered.document, rendered.status)
