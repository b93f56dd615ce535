"""
=============================================================================
HTTP STATUS EXCEPTIONS
=============================================================================

Every status code in the table has its own exception class, so request
handlers can signal an HTTP outcome by raising it and the server can
turn it back into a response.

=============================================================================
CLASS HIERARCHY
=============================================================================

    Status (Exception)
    ├── Info                     1xx   Continue, SwitchingProtocols
    ├── Success                  2xx   OK, Created, NoContent, ...
    ├── Redirect                 3xx   MovedPermanently, Found, ...
    └── Error
        ├── ClientError          4xx   BadRequest, NotFound, ...
        └── ServerError          5xx   InternalServerError, ...

Catch as broadly or as narrowly as you need:

    try:
        handler(request)
    except NotFound:              # one exact status
        ...
    except ClientError:           # any 4xx
        ...
    except Error as e:            # any 4xx or 5xx
        send_error(conn, e.code, str(e))

The category classes carry no code and cannot be instantiated; only the
per-code classes can be raised.

=============================================================================
MESSAGES ARE ESCAPED
=============================================================================

A message given to a status exception is passed through Status.escape
(accesslog.escape unless the server swaps it at startup) before it is
stored, because messages routinely echo request data into the logs.

    >>> str(BadRequest("bad\\r\\ninjected"))
    'bad\\\\r\\\\ninjected'

=============================================================================
"""

import copyreg
import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NoReturn, Optional, Type

from .accesslog import escape
from .status_codes import HTTPStatus, StatusCategory, category, reason_phrase


logger = logging.getLogger(__name__)


# Classes that declare a code, in declaration order. Consumed once when the
# registry is built below.
_declared: List[type] = []
_sealed = False


class Status(Exception):
    """
    Base class of every HTTP status exception.

    Subclasses declare ``code``; ``reason_phrase`` is filled in from the
    status table when the class is defined.

    Attributes:
        code: The HTTP status code (class attribute).
        reason_phrase: The reason phrase for the code (class attribute).
        message: The escaped message, or None if none was given.
    """

    code: Optional[HTTPStatus] = None
    reason_phrase: Optional[str] = None

    # Replaceable at server startup, before any request is handled.
    escape = staticmethod(escape)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "code" not in cls.__dict__:
            return
        if _sealed:
            raise TypeError(
                f"Cannot declare {cls.__name__}: the status table is fixed"
            )
        phrase = reason_phrase(cls.code)
        if phrase is None:
            raise TypeError(f"{cls.__name__}: unknown status code {cls.code!r}")
        cls.code = HTTPStatus(int(cls.code))
        cls.reason_phrase = phrase
        _declared.append(cls)

    def __init__(self, message: Optional[str] = None):
        if self.code is None:
            raise TypeError(
                f"{type(self).__name__} is a status category; "
                f"raise one of its registered status classes instead"
            )
        if message is not None:
            message = self.escape(message)
        self.message = message
        if message is None:
            super().__init__()
        else:
            super().__init__(message)

    def __int__(self) -> int:
        return int(self.code)

    def __str__(self) -> str:
        if self.message is None:
            return self.reason_phrase
        return self.message

    def __reduce__(self):
        # Rebuild without __init__: args already hold the escaped message.
        return (
            copyreg.__newobj__,
            (type(self),),
            {**self.__dict__, "args": self.args},
        )


class Info(Status):
    """1xx"""


class Success(Status):
    """2xx"""


class Redirect(Status):
    """3xx"""


class Error(Status):
    """Any 4xx or 5xx status."""


class ClientError(Error):
    """4xx"""


class ServerError(Error):
    """5xx"""


# =============================================================================
# 1xx INFORMATIONAL
# =============================================================================

class Continue(Info):
    code = HTTPStatus.CONTINUE


class SwitchingProtocols(Info):
    code = HTTPStatus.SWITCHING_PROTOCOLS


# =============================================================================
# 2xx SUCCESS
# =============================================================================

class OK(Success):
    code = HTTPStatus.OK


class Created(Success):
    code = HTTPStatus.CREATED


class Accepted(Success):
    code = HTTPStatus.ACCEPTED


class NonAuthoritativeInformation(Success):
    code = HTTPStatus.NON_AUTHORITATIVE_INFORMATION


class NoContent(Success):
    code = HTTPStatus.NO_CONTENT


class ResetContent(Success):
    code = HTTPStatus.RESET_CONTENT


class PartialContent(Success):
    code = HTTPStatus.PARTIAL_CONTENT


# =============================================================================
# 3xx REDIRECTION
# =============================================================================

class MultipleChoices(Redirect):
    code = HTTPStatus.MULTIPLE_CHOICES


class MovedPermanently(Redirect):
    code = HTTPStatus.MOVED_PERMANENTLY


class Found(Redirect):
    code = HTTPStatus.FOUND


class SeeOther(Redirect):
    code = HTTPStatus.SEE_OTHER


class NotModified(Redirect):
    code = HTTPStatus.NOT_MODIFIED


class UseProxy(Redirect):
    code = HTTPStatus.USE_PROXY


class TemporaryRedirect(Redirect):
    code = HTTPStatus.TEMPORARY_REDIRECT


# =============================================================================
# 4xx CLIENT ERRORS
# =============================================================================

class BadRequest(ClientError):
    code = HTTPStatus.BAD_REQUEST


class Unauthorized(ClientError):
    code = HTTPStatus.UNAUTHORIZED


class PaymentRequired(ClientError):
    code = HTTPStatus.PAYMENT_REQUIRED


class Forbidden(ClientError):
    code = HTTPStatus.FORBIDDEN


class NotFound(ClientError):
    code = HTTPStatus.NOT_FOUND


class MethodNotAllowed(ClientError):
    code = HTTPStatus.METHOD_NOT_ALLOWED


class NotAcceptable(ClientError):
    code = HTTPStatus.NOT_ACCEPTABLE


class ProxyAuthenticationRequired(ClientError):
    code = HTTPStatus.PROXY_AUTHENTICATION_REQUIRED


class RequestTimeout(ClientError):
    code = HTTPStatus.REQUEST_TIMEOUT


class Conflict(ClientError):
    code = HTTPStatus.CONFLICT


class Gone(ClientError):
    code = HTTPStatus.GONE


class LengthRequired(ClientError):
    code = HTTPStatus.LENGTH_REQUIRED


class PreconditionFailed(ClientError):
    code = HTTPStatus.PRECONDITION_FAILED


class RequestEntityTooLarge(ClientError):
    code = HTTPStatus.REQUEST_ENTITY_TOO_LARGE


class RequestURITooLarge(ClientError):
    code = HTTPStatus.REQUEST_URI_TOO_LARGE


class UnsupportedMediaType(ClientError):
    code = HTTPStatus.UNSUPPORTED_MEDIA_TYPE


class RequestRangeNotSatisfiable(ClientError):
    code = HTTPStatus.REQUEST_RANGE_NOT_SATISFIABLE


class ExpectationFailed(ClientError):
    code = HTTPStatus.EXPECTATION_FAILED


# =============================================================================
# 5xx SERVER ERRORS
# =============================================================================

class InternalServerError(ServerError):
    code = HTTPStatus.INTERNAL_SERVER_ERROR


class NotImplemented(ServerError):  # noqa: A001
    code = HTTPStatus.NOT_IMPLEMENTED


class BadGateway(ServerError):
    code = HTTPStatus.BAD_GATEWAY


class ServiceUnavailable(ServerError):
    code = HTTPStatus.SERVICE_UNAVAILABLE


class GatewayTimeout(ServerError):
    code = HTTPStatus.GATEWAY_TIMEOUT


class HTTPVersionNotSupported(ServerError):
    code = HTTPStatus.HTTP_VERSION_NOT_SUPPORTED


# =============================================================================
# REGISTRY
# =============================================================================

CATEGORY_CLASSES: Mapping[StatusCategory, Type[Status]] = MappingProxyType({
    StatusCategory.INFO: Info,
    StatusCategory.SUCCESS: Success,
    StatusCategory.REDIRECT: Redirect,
    StatusCategory.CLIENT_ERROR: ClientError,
    StatusCategory.SERVER_ERROR: ServerError,
})


def _build_registry(classes: List[type]) -> Mapping[int, Type[Status]]:
    """
    Index the declared status classes by code and check them.

    Every code in the table must have exactly one class, and that class
    must derive from the category base matching its range.
    """
    registry: Dict[int, Type[Status]] = {}
    for cls in classes:
        code = int(cls.code)
        parent = CATEGORY_CLASSES[category(code)]
        if not issubclass(cls, parent):
            raise TypeError(
                f"{cls.__name__} ({code}) must derive from {parent.__name__}"
            )
        if code in registry:
            raise TypeError(
                f"Status {code} declared twice: "
                f"{registry[code].__name__} and {cls.__name__}"
            )
        registry[code] = cls

    missing = sorted(set(HTTPStatus) - set(registry))
    if missing:
        raise TypeError(f"No exception class for status codes {missing}")

    logger.debug(f"Registered {len(registry)} status exception classes")
    return MappingProxyType(registry)


CODE_TO_ERROR: Mapping[int, Type[Status]] = _build_registry(_declared)
_declared.clear()
_sealed = True


def lookup_status_error(code: Any) -> Optional[Type[Status]]:
    """
    Return the exception class registered for a status code.

        >>> lookup_status_error(404)
        <class 'httpstatus.exceptions.NotFound'>
        >>> lookup_status_error(999) is None
        True

    Args:
        code: Status code (HTTPStatus, int, or numeric string).

    Returns:
        The class for exactly this code, or None if it isn't registered.
    """
    return CODE_TO_ERROR.get(int(code))


def raise_status(variant: Any, message: Optional[str] = None) -> NoReturn:
    """
    Raise the status exception for ``variant`` with an optional message.

    Args:
        variant: A registered status class (e.g. NotFound) or a
            registered status code (e.g. 404).
        message: Human-readable detail; escaped before it is stored.

    Raises:
        Status: Always; the instance of the requested status class.
        TypeError: If ``variant`` is not a registered status.
    """
    if isinstance(variant, type):
        code = getattr(variant, "code", None)
        cls = lookup_status_error(code) if code is not None else None
        if cls is not variant:
            cls = None
    else:
        cls = lookup_status_error(variant)

    if cls is None:
        logger.warning(f"Refusing to raise unregistered status {variant!r}")
        raise TypeError(f"{variant!r} is not a registered HTTP status")

    logger.debug(f"Raising {int(cls.code)} {cls.reason_phrase}")
    raise cls(message)
