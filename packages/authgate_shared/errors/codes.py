"""Shared public error code constants.

Codes are lowercase snake_case tokens that are safe to disclose to callers.
Service-specific codes live beside the errors that carry them.
"""

# Fallback for any error that cannot be disclosed.
SERVER_ERROR = "server_error"

# Public code of a field-keyed validation aggregate.
VALIDATION_ERROR = "validation_error"
