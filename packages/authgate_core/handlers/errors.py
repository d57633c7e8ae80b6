"""Errors returned by request handlers.

Each public error embeds its public code in its text, for example
``"handlers: not_found, resource not found"``. Callers receive the code;
the rest of the text stays internal.
"""

from __future__ import annotations

from packages.authgate_shared.errors import EncodedError, wrapper

wrap = wrapper("handlers")


class ControllerError(EncodedError):
    """Public error raised by the handlers layer."""

    prefix = "handlers"


class ModelError(EncodedError):
    """Public error raised while parsing or validating models."""

    prefix = "models"


class NotFoundError(ControllerError):
    default_text = "handlers: not_found, resource not found"


class InvalidFormInputError(ControllerError):
    default_text = "handlers: invalid_form, provided input cannot be parsed"


class ContentTypeNotAcceptedError(ControllerError):
    default_text = (
        "handlers: content_type_not_accepted, the content-type provided is not supported"
    )


class GrantTypeNotAcceptedError(ControllerError):
    default_text = (
        "handlers: unsupported_grant_type, the grant-type provided is not supported"
    )


class ParseError(ModelError):
    default_text = "models: invalid_parse, contents are not in appropriate format"


class PrivateError(Exception):
    """Internal failure whose text must never reach a caller."""
