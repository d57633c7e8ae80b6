"""Request handler error catalog."""

from .errors import (
    ContentTypeNotAcceptedError,
    ControllerError,
    GrantTypeNotAcceptedError,
    InvalidFormInputError,
    ModelError,
    NotFoundError,
    ParseError,
    PrivateError,
    wrap,
)

__all__ = [
    "ContentTypeNotAcceptedError",
    "ControllerError",
    "GrantTypeNotAcceptedError",
    "InvalidFormInputError",
    "ModelError",
    "NotFoundError",
    "ParseError",
    "PrivateError",
    "wrap",
]
