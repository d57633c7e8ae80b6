"""Public error classification API for authgate services."""

from . import codes
from .classify import ErrorClassification, ErrorKind, classify
from .codec import ErrorCodeDecodeError, decode_code, encode_code
from .predicates import as_disclosable, as_validation_aggregate
from .shutdown import ShutdownSignal, is_shutdown, new_shutdown
from .types import Disclosable, EncodedError, FieldValidationError, PublicError
from .wrapping import WrappedError, root_cause, unwrap_once, wrapper

__all__ = [
    "Disclosable",
    "EncodedError",
    "ErrorClassification",
    "ErrorCodeDecodeError",
    "ErrorKind",
    "FieldValidationError",
    "PublicError",
    "ShutdownSignal",
    "WrappedError",
    "as_disclosable",
    "as_validation_aggregate",
    "classify",
    "codes",
    "decode_code",
    "encode_code",
    "is_shutdown",
    "new_shutdown",
    "root_cause",
    "unwrap_once",
    "wrapper",
]
