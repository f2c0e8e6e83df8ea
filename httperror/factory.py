import math
import numbers
import re
from decimal import Decimal
from types import MappingProxyType
from .status import MIN_ERROR_STATUS, MAX_ERROR_STATUS
from .exceptions import *


_VARIANTS = MappingProxyType({
    cls._status.value: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        PaymentRequiredError,
        ForbiddenError,
        NotFoundError,
        MethodNotAllowedError,
        NotAcceptableError,
        ProxyAuthenticationRequiredError,
        RequestTimeoutError,
        ConflictError,
        GoneError,
        LengthRequiredError,
        PreconditionFailedError,
        PayloadTooLargeError,
        UriTooLongError,
        UnsupportedMediaTypeError,
        RangeNotSatisfiableError,
        ExpectationFailedError,
        IAmATeapotError,
        MisdirectedRequestError,
        UnprocessableEntityError,
        LockedError,
        FailedDependencyError,
        TooEarlyError,
        UpgradeRequiredError,
        PreconditionRequiredError,
        TooManyRequestsError,
        RequestHeaderFieldsTooLargeError,
        UnavailableForLegalReasonsError,
        InternalServerError,
        HTTPNotImplementedError,
        BadGatewayError,
        ServiceUnavailableError,
        GatewayTimeoutError,
        HTTPVersionNotSupportedError,
        VariantAlsoNegotiatesError,
        InsufficientStorageError,
        LoopDetectedError,
        NotExtendedError,
        NetworkAuthenticationRequiredError,
    )
})

_NUMERIC_RE_PATTERN = r"^\s*([+-]?[0-9]+)\s*$"

def registered_variants():
    return _VARIANTS

def variant_for(code):
    if not isinstance(code, int) or isinstance(code, bool):
        return None
    return _VARIANTS.get(code)

def _numeric(code):
    if isinstance(code, bool):
        raise InvalidInput(code)
    if isinstance(code, numbers.Integral):
        return int(code)
    if isinstance(code, (numbers.Real, Decimal)):
        try:
            return float(code)
        except OverflowError:
            return math.inf if code > 0 else -math.inf
        except ValueError:
            raise InvalidInput(code)
    if isinstance(code, str):
        res = re.match(_NUMERIC_RE_PATTERN, code)
        if res is None:
            raise InvalidInput(code)
        digits = res.group(1)
        try:
            return int(digits)
        except ValueError:
            # longer than the interpreter's int conversion limit
            return -math.inf if digits.startswith("-") else math.inf
    raise InvalidInput(code)

def from_status_code(code):
    """
    Build the error for an HTTP status code, e.g. one read from an
    upstream response.

    Returns None when the code is not an error status (below 400, None,
    NaN) or is an unregistered 4xx/5xx code such as 419 or 509.
    Raises InvalidStatusCode above 511 and InvalidInput when the value
    can't be read as a number ("abc", True, [404]).
    """
    if code is None:
        return None

    value = _numeric(code)
    if isinstance(value, float) and math.isnan(value):
        return None
    if value < MIN_ERROR_STATUS:
        return None
    if value > MAX_ERROR_STATUS:
        raise InvalidStatusCode(code)

    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)

    variant = _VARIANTS.get(value)
    if variant is None:
        return None
    return variant()

error_from_code = from_status_code
