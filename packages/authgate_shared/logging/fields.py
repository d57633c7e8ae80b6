"""Canonical logging field names for authgate services.

Keeping names centralized prevents drift between components and log queries.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Request correlation fields.
REQUEST_ID = "request_id"
METHOD = "method"
PATH = "path"

# Error rendering fields.
ERROR_TYPE = "error_type"
PUBLIC_CODE = "public_code"
STATUS = "status"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
