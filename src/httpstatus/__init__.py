"""
=============================================================================
HTTPSTATUS - HTTP Status Codes, Reason Phrases and Status Exceptions
=============================================================================

The status layer of an HTTP server: the fixed table of status codes and
reason phrases, the category predicates built on it, and one exception
class per code for signalling an outcome up the call stack.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpstatus/
    ├── __init__.py          # This file - package exports
    ├── status_codes.py      # HTTPStatus enum, reason phrases, predicates
    ├── exceptions.py        # Status exception hierarchy and registry
    └── accesslog.py         # Escaping of messages bound for the logs

=============================================================================
QUICK START
=============================================================================

    from httpstatus import (
        reason_phrase, is_client_error, status_line,
        lookup_status_error, raise_status, ClientError,
    )
    from httpstatus.exceptions import NotFound

    reason_phrase(404)              # 'Not Found'
    is_client_error(404)            # True
    status_line(404)                # 'HTTP/1.1 404 Not Found'

    def handler(request):
        raise NotFound(f"No such page: {request.path}")

    try:
        handler(request)
    except ClientError as e:
        send_error(conn, e.code, str(e))

    lookup_status_error(503)        # <class '...ServiceUnavailable'>
    raise_status(400, "bad input")  # raises BadRequest

Everything is built at import time and never changes afterwards, so it
is safe to share between worker threads without locking.

=============================================================================
"""

__version__ = "1.0.0"

from .accesslog import escape
from .status_codes import (
    HTTPStatus,
    StatusCategory,
    STATUS_MESSAGES,
    reason_phrase,
    is_informational,
    is_success,
    is_redirect,
    is_error,
    is_client_error,
    is_server_error,
    category,
    status_line,
)
from .exceptions import (
    Status,
    Info,
    Success,
    Redirect,
    Error,
    ClientError,
    ServerError,
    CATEGORY_CLASSES,
    CODE_TO_ERROR,
    lookup_status_error,
    raise_status,
)

__all__ = [
    # Table
    "HTTPStatus",
    "StatusCategory",
    "STATUS_MESSAGES",
    "reason_phrase",
    "status_line",

    # Classification
    "is_informational",
    "is_success",
    "is_redirect",
    "is_error",
    "is_client_error",
    "is_server_error",
    "category",

    # Exceptions
    "Status",
    "Info",
    "Success",
    "Redirect",
    "Error",
    "ClientError",
    "ServerError",
    "CATEGORY_CLASSES",
    "CODE_TO_ERROR",
    "lookup_status_error",
    "raise_status",

    # Log escaping
    "escape",

    "__version__",
]
