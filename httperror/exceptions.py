from .status import Status, TITLES


def _check_optional_str(name, value):
    if value is not None and not isinstance(value, str):
        raise TypeError(
            f"{name} must be str type or None."
        )

def _str_list(name, value):
    if not isinstance(value, (list, tuple)):
        raise TypeError(
            f"{name} must be list type."
        )
    for item in value:
        if not isinstance(item, str):
            raise TypeError(
                f"{name} items must be str type."
            )
    return list(value)

def _challenge(name, value):
    if value is None or isinstance(value, str):
        return value
    return _str_list(name, value)

def _retry_after(value):
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            "retry_after must be int type."
        )
    if value < 0:
        raise ValueError(
            f"retry_after must not be negative. ({value})"
        )
    return value

def _header(name, value):
    return {"name": name, "value": value}


class HTTPException(Exception):
    """
    Base of every HTTP error in the catalog.

    parameters:
    @detail: free text description of this occurrence. str(e) falls back
             to the title when it is not given.
    @type, @instance: problem details metadata, never filled in by the
             catalog itself.
    """
    _status = Status.INTERNAL_SERVER_ERROR
    _extra_fields = ()

    def __init__(
        self,
        detail = None,
        *,
        type = None,
        instance = None,
    ):
        _check_optional_str("detail", detail)
        _check_optional_str("type", type)
        _check_optional_str("instance", instance)

        self._detail = detail
        self._type = type
        self._instance = instance
        super().__init__(str(self))

    def __str__(self):
        return self._detail if self._detail else self.title

    def __repr__(self):
        args = ", ".join(
            f"{name}={value!r}"
            for name, value in self._field_items()
            if value is not None
        )
        return f"{self.__class__.__name__}({args})"

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._field_items() == other._field_items()

    def __hash__(self):
        return hash((self.__class__, self.http_status, self._detail))

    def _field_items(self):
        names = ("detail", "type", "instance") + self._extra_fields
        return [(name, getattr(self, name)) for name in names]

    def _header_items(self):
        return list()

    @property
    def http_status(self):
        return int(self._status)

    @property
    def title(self):
        return TITLES[self._status]

    @property
    def detail(self):
        return self._detail

    @property
    def type(self):
        return self._type

    @property
    def instance(self):
        return self._instance

    @property
    def headers(self):
        return self._header_items()

    def to_dict(self):
        return {
            "type": self._type,
            "title": self.title,
            "status": self.http_status,
            "detail": self._detail,
            "instance": self._instance,
        }


class HTTPClientError(HTTPException):
    _status = Status.BAD_REQUEST

class HTTPServerError(HTTPException):
    _status = Status.INTERNAL_SERVER_ERROR


class _RetryAfterMixin:
    """
    Temporary conditions may tell the client when to come back,
    in seconds, through a Retry-After header.
    """
    _extra_fields = ("retry_after",)

    def __init__(
        self,
        detail = None,
        retry_after = None,
        **kwargs
    ):
        self._retry_after = _retry_after(retry_after)
        super().__init__(detail, **kwargs)

    @property
    def retry_after(self):
        return self._retry_after

    def _header_items(self):
        if self._retry_after is None:
            return list()
        return [_header("Retry-After", str(self._retry_after))]


# 4xx Error (Client error)
class BadRequestError(HTTPClientError):
    _status = Status.BAD_REQUEST

class UnauthorizedError(HTTPClientError):
    """
    Authentication is missing or failed.

    The challenge sent back in WWW-Authenticate may be one scheme or
    several, in order of preference:

        UnauthorizedError("Login failed", "Basic")
        UnauthorizedError("Login failed", ['Basic realm="api"', "Bearer"])
    """
    _status = Status.UNAUTHORIZED
    _extra_fields = ("www_authenticate",)

    def __init__(
        self,
        detail = None,
        www_authenticate = None,
        **kwargs
    ):
        self._www_authenticate = _challenge("www_authenticate", www_authenticate)
        super().__init__(detail, **kwargs)

    @property
    def www_authenticate(self):
        return self._www_authenticate

    def _header_items(self):
        if self._www_authenticate is None:
            return list()
        if isinstance(self._www_authenticate, str):
            return [_header("WWW-Authenticate", self._www_authenticate)]
        return [_header("WWW-Authenticate", x) for x in self._www_authenticate]

class PaymentRequiredError(HTTPClientError):
    _status = Status.PAYMENT_REQUIRED

class ForbiddenError(HTTPClientError):
    """The request is understood but the caller lacks permission."""
    _status = Status.FORBIDDEN

class NotFoundError(HTTPClientError):
    _status = Status.NOT_FOUND

class MethodNotAllowedError(HTTPClientError):
    """
    The method is not supported by the target resource.

        MethodNotAllowedError("read only", ["GET", "HEAD", "OPTIONS"])
    """
    _status = Status.METHOD_NOT_ALLOWED
    _extra_fields = ("allow",)

    def __init__(
        self,
        detail = None,
        allow = None,
        **kwargs
    ):
        self._allow = _str_list("allow", allow) if allow is not None else None
        super().__init__(detail, **kwargs)

    @property
    def allow(self):
        return self._allow

    def _header_items(self):
        if self._allow is None:
            return list()
        return [_header("Allow", ", ".join(self._allow))]

class NotAcceptableError(HTTPClientError):
    _status = Status.NOT_ACCEPTABLE

class ProxyAuthenticationRequiredError(HTTPClientError):
    """Same as UnauthorizedError, for the proxy in front of the server."""
    _status = Status.PROXY_AUTHENTICATION_REQUIRED
    _extra_fields = ("proxy_authenticate",)

    def __init__(
        self,
        detail = None,
        proxy_authenticate = None,
        **kwargs
    ):
        self._proxy_authenticate = _challenge("proxy_authenticate", proxy_authenticate)
        super().__init__(detail, **kwargs)

    @property
    def proxy_authenticate(self):
        return self._proxy_authenticate

    def _header_items(self):
        if self._proxy_authenticate is None:
            return list()
        if isinstance(self._proxy_authenticate, str):
            return [_header("Proxy-Authenticate", self._proxy_authenticate)]
        return [_header("Proxy-Authenticate", x) for x in self._proxy_authenticate]

class RequestTimeoutError(HTTPClientError):
    _status = Status.REQUEST_TIMEOUT

class ConflictError(HTTPClientError):
    """The request conflicts with the current state of the resource."""
    _status = Status.CONFLICT

class GoneError(HTTPClientError):
    """The resource was removed on purpose and will not come back."""
    _status = Status.GONE

class LengthRequiredError(HTTPClientError):
    _status = Status.LENGTH_REQUIRED

class PreconditionFailedError(HTTPClientError):
    _status = Status.PRECONDITION_FAILED

class PayloadTooLargeError(_RetryAfterMixin, HTTPClientError):
    """
    The request body is larger than the server accepts.

        PayloadTooLargeError("try again in 10 minutes", 600)
    """
    _status = Status.PAYLOAD_TOO_LARGE

class UriTooLongError(HTTPClientError):
    _status = Status.URI_TOO_LONG

class UnsupportedMediaTypeError(HTTPClientError):
    _status = Status.UNSUPPORTED_MEDIA_TYPE

class RangeNotSatisfiableError(HTTPClientError):
    _status = Status.RANGE_NOT_SATISFIABLE

class ExpectationFailedError(HTTPClientError):
    _status = Status.EXPECTATION_FAILED

class IAmATeapotError(HTTPClientError):
    _status = Status.I_AM_A_TEAPOT

class MisdirectedRequestError(HTTPClientError):
    _status = Status.MISDIRECTED_REQUEST

class UnprocessableEntityError(HTTPClientError):
    """Well formed, but semantically wrong."""
    _status = Status.UNPROCESSABLE_ENTITY

class LockedError(HTTPClientError):
    _status = Status.LOCKED

class FailedDependencyError(HTTPClientError):
    _status = Status.FAILED_DEPENDENCY

class TooEarlyError(HTTPClientError):
    _status = Status.TOO_EARLY

class UpgradeRequiredError(HTTPClientError):
    _status = Status.UPGRADE_REQUIRED

class PreconditionRequiredError(HTTPClientError):
    _status = Status.PRECONDITION_REQUIRED

class TooManyRequestsError(_RetryAfterMixin, HTTPClientError):
    """
    Rate limited.

        TooManyRequestsError("slow down", 600)
    """
    _status = Status.TOO_MANY_REQUESTS

class RequestHeaderFieldsTooLargeError(HTTPClientError):
    _status = Status.REQUEST_HEADER_FIELDS_TOO_LARGE

class UnavailableForLegalReasonsError(HTTPClientError):
    _status = Status.UNAVAILABLE_FOR_LEGAL_REASONS

# 5xx Error (Server error)
class InternalServerError(HTTPServerError):
    _status = Status.INTERNAL_SERVER_ERROR

class HTTPNotImplementedError(HTTPServerError):
    _status = Status.NOT_IMPLEMENTED

class BadGatewayError(HTTPServerError):
    _status = Status.BAD_GATEWAY

class ServiceUnavailableError(_RetryAfterMixin, HTTPServerError):
    """
    Down for now.

        ServiceUnavailableError("down for maintenance", 600)
    """
    _status = Status.SERVICE_UNAVAILABLE

class GatewayTimeoutError(HTTPServerError):
    _status = Status.GATEWAY_TIMEOUT

class HTTPVersionNotSupportedError(HTTPServerError):
    _status = Status.HTTP_VERSION_NOT_SUPPORTED

class VariantAlsoNegotiatesError(HTTPServerError):
    _status = Status.VARIANT_ALSO_NEGOTIATES

class InsufficientStorageError(HTTPServerError):
    _status = Status.INSUFFICIENT_STORAGE

class LoopDetectedError(HTTPServerError):
    _status = Status.LOOP_DETECTED

class NotExtendedError(HTTPServerError):
    _status = Status.NOT_EXTENDED

class NetworkAuthenticationRequiredError(HTTPServerError):
    _status = Status.NETWORK_AUTHENTICATION_REQUIRED


class InvalidStatusCode(ValueError):
    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(
            f"invalid status code. ({status_code})"
        )

class InvalidInput(ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"status code must be int or numeric str. ({value!r})"
        )
