"""
=============================================================================
HTTP STATUS CODES (RFC 2616)
=============================================================================

This module defines the fixed table of HTTP status codes understood by the
server, together with their reason phrases and category predicates.

=============================================================================
STATUS CODE CATEGORIES
=============================================================================

HTTP status codes are 3-digit numbers grouped by the first digit:

    ┌────────────────────────────────────────────────────────────────────┐
    │                      STATUS CODE CATEGORIES                        │
    ├────────┬───────────────────────────────────────────────────────────┤
    │  1xx   │ INFORMATIONAL: Request received, continuing process      │
    │        │                                                           │
    │        │ 100 Continue      - Keep sending request body            │
    │        │ 101 Switching     - Upgrading the connection             │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  2xx   │ SUCCESS: Request received, understood, accepted          │
    │        │                                                           │
    │        │ 200 OK            - Standard success response            │
    │        │ 201 Created       - Resource created (POST)              │
    │        │ 204 No Content    - Success with no body (DELETE)        │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  3xx   │ REDIRECTION: Further action needed                       │
    │        │                                                           │
    │        │ 301 Moved Permanently - Resource moved forever           │
    │        │ 302 Found             - Temporary redirect               │
    │        │ 304 Not Modified      - Use cached version               │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  4xx   │ CLIENT ERROR: Problem with the request                   │
    │        │                                                           │
    │        │ 400 Bad Request   - Malformed request syntax             │
    │        │ 403 Forbidden     - Not allowed                          │
    │        │ 404 Not Found     - Resource doesn't exist               │
    │        │ 413 Request Entity Too Large - Body over the limit       │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  5xx   │ SERVER ERROR: Problem with the server                    │
    │        │                                                           │
    │        │ 500 Internal Server Error - Unexpected server failure    │
    │        │ 503 Service Unavailable   - Server overloaded/down       │
    │        │ 505 HTTP Version Not Supported                           │
    └────────┴───────────────────────────────────────────────────────────┘

The ranges are half-open and never overlap. A code outside [100, 600)
belongs to no category: every predicate answers False for it.

=============================================================================
WHY A FIXED TABLE?
=============================================================================

The reason phrases below go out on the wire in every status line, so they
are reproduced verbatim (including the RFC 2616 spellings "Request Entity
Too Large", "Request-URI Too Large" and "Request Range Not Satisfiable").

The table is built once at import time and exposed read-only:

    HTTPStatus          IntEnum, one member per code
    STATUS_MESSAGES     MappingProxyType {int code: phrase}

Nothing writes to either afterwards, so any number of worker threads can
read them without a lock.

=============================================================================
INTERVIEW QUESTIONS ABOUT STATUS CODES
=============================================================================

Q: "What should a lookup do for a code it doesn't know?"
A: "Answer 'absent' (None/False), don't raise. Upstream servers send
   all sorts of codes; the caller decides whether that matters."

Q: "Why is 404 an error but 304 not?"
A: "304 Not Modified is a redirection-class answer to a conditional
   request. Errors are exactly 400-599: 4xx blames the client,
   5xx blames the server."

Q: "Which responses never carry a body?"
A: "1xx, 204 No Content and 304 Not Modified. The category predicates
   here are what a server uses to make that decision."

=============================================================================
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class HTTPStatus(IntEnum):
    """
    HTTP status codes known to the server.

    This enum extends IntEnum, so status codes can be used as integers:

        >>> HTTPStatus.NOT_FOUND
        <HTTPStatus.NOT_FOUND: 404>
        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'

    Member names are the reason phrase in upper case with spaces and
    hyphens replaced by underscores.
    """

    # =========================================================================
    # 1xx INFORMATIONAL
    # =========================================================================
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101

    # =========================================================================
    # 2xx SUCCESS
    # =========================================================================
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206

    # =========================================================================
    # 3xx REDIRECTION
    # =========================================================================
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307    # 306 is reserved and unused

    # =========================================================================
    # 4xx CLIENT ERRORS
    # =========================================================================
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LARGE = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUEST_RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417

    # =========================================================================
    # 5xx SERVER ERRORS
    # =========================================================================
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def phrase(self) -> str:
        """
        Get the reason phrase for this status code.

        The reason phrase is the text that appears after the status code
        in an HTTP response line:

            HTTP/1.1 404 Not Found
                     ─── ─────────
                      │      │
                      │      └── Reason phrase
                      └────────── Status code
        """
        return STATUS_MESSAGES[self]

    @property
    def category(self) -> "StatusCategory":
        """The category this code falls in."""
        return category(self)

    @property
    def is_informational(self) -> bool:
        return is_informational(self)

    @property
    def is_success(self) -> bool:
        return is_success(self)

    @property
    def is_redirect(self) -> bool:
        return is_redirect(self)

    @property
    def is_error(self) -> bool:
        return is_error(self)

    @property
    def is_client_error(self) -> bool:
        return is_client_error(self)

    @property
    def is_server_error(self) -> bool:
        return is_server_error(self)


class StatusCategory(Enum):
    """
    The five top-level kinds of status code.

    CLIENT_ERROR and SERVER_ERROR together make up the "error" codes
    (see is_error); the exception hierarchy mirrors this with a shared
    Error base class.
    """

    INFO = "info"
    SUCCESS = "success"
    REDIRECT = "redirect"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


# =============================================================================
# REASON PHRASES
# =============================================================================
#
# HTTP/1.1 200 OK
#          ─── ──
#           │   │
#           │   └── Reason phrase (from this table)
#           └────── Status code
#
# Keys are plain ints so lookups work for anything int() accepts.
#
# =============================================================================

STATUS_MESSAGES: Mapping[int, str] = MappingProxyType({
    # 1xx Informational
    100: "Continue",
    101: "Switching Protocols",

    # 2xx Success
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",

    # 3xx Redirection
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",

    # 4xx Client Errors
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Large",
    415: "Unsupported Media Type",
    416: "Request Range Not Satisfiable",
    417: "Expectation Failed",

    # 5xx Server Errors
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
})


# =============================================================================
# LOOKUPS AND PREDICATES
# =============================================================================
#
# Every function takes anything int() accepts: an HTTPStatus member, a
# plain int, or a numeric string such as "404". Unknown codes are not an
# error; they simply have no phrase and no category.
#
# =============================================================================

def reason_phrase(code: Any) -> Optional[str]:
    """
    Return the reason phrase for a status code.

        >>> reason_phrase(404)
        'Not Found'
        >>> reason_phrase(999) is None
        True

    Args:
        code: Status code (HTTPStatus, int, or numeric string).

    Returns:
        The registered phrase, or None if the code is not in the table.
    """
    return STATUS_MESSAGES.get(int(code))


def is_informational(code: Any) -> bool:
    """Is it a 1xx (informational) status?"""
    return 100 <= int(code) < 200


def is_success(code: Any) -> bool:
    """Is it a 2xx (success) status?"""
    return 200 <= int(code) < 300


def is_redirect(code: Any) -> bool:
    """Is it a 3xx (redirection) status?"""
    return 300 <= int(code) < 400


def is_error(code: Any) -> bool:
    """Is it an error status (4xx or 5xx)?"""
    return 400 <= int(code) < 600


def is_client_error(code: Any) -> bool:
    """Is it a 4xx (client error) status?"""
    return 400 <= int(code) < 500


def is_server_error(code: Any) -> bool:
    """Is it a 5xx (server error) status?"""
    return 500 <= int(code) < 600


def category(code: Any) -> Optional[StatusCategory]:
    """
    Classify a status code by range.

    Returns:
        The StatusCategory for codes in [100, 600), otherwise None.
    """
    code = int(code)
    if is_informational(code):
        return StatusCategory.INFO
    if is_success(code):
        return StatusCategory.SUCCESS
    if is_redirect(code):
        return StatusCategory.REDIRECT
    if is_client_error(code):
        return StatusCategory.CLIENT_ERROR
    if is_server_error(code):
        return StatusCategory.SERVER_ERROR
    return None


def status_line(code: Any, version: str = "HTTP/1.1") -> str:
    """
    Build the status line of a response.

    Format: HTTP-VERSION SP STATUS-CODE SP REASON-PHRASE
    Example: "HTTP/1.1 200 OK"

    Raises:
        ValueError: If the code is not in the table.
    """
    phrase = reason_phrase(code)
    if phrase is None:
        raise ValueError(f"No reason phrase registered for status {code!r}")
    return f"{version} {int(code)} {phrase}"
