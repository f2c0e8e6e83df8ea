"""
Classification of error-like values.

Every predicate here is duck typed: a value qualifies by the fields it
exposes, either as attributes or, for plain dicts, as keys. The concrete
class is never looked at, so anything with http_status == 404 is a
"not found" error whatever it was constructed as.

None of these functions raise, even when a property of the value does.
"""
from collections.abc import Mapping
from .status import Status, CLIENT_ERROR_RANGE, SERVER_ERROR_RANGE

_MISSING = object()

def _field(value, name):
    # foreign properties and mappings may raise on lookup
    try:
        if isinstance(value, Mapping):
            return value.get(name, _MISSING)
        return getattr(value, name, _MISSING)
    except Exception:
        return _MISSING

def _status_of(value):
    if value is None:
        return None
    status = _field(value, "http_status")
    if not isinstance(status, int) or isinstance(status, bool):
        return None
    return status

def is_http_error(value):
    return _status_of(value) is not None

def is_http_problem(value):
    if not is_http_error(value):
        return False
    title = _field(value, "title")
    return title is not _MISSING and title is not None

def is_client_error(value):
    return _status_of(value) in CLIENT_ERROR_RANGE

def is_server_error(value):
    return _status_of(value) in SERVER_ERROR_RANGE

def has_status(value, code):
    status = _status_of(value)
    return status is not None and status == code


# 4xx Error (Client error)
def is_bad_request_error(value):
    return has_status(value, Status.BAD_REQUEST)

def is_unauthorized_error(value):
    return has_status(value, Status.UNAUTHORIZED)

def is_payment_required_error(value):
    return has_status(value, Status.PAYMENT_REQUIRED)

def is_forbidden_error(value):
    return has_status(value, Status.FORBIDDEN)

def is_not_found_error(value):
    return has_status(value, Status.NOT_FOUND)

def is_method_not_allowed_error(value):
    return has_status(value, Status.METHOD_NOT_ALLOWED)

def is_not_acceptable_error(value):
    return has_status(value, Status.NOT_ACCEPTABLE)

def is_proxy_authentication_required_error(value):
    return has_status(value, Status.PROXY_AUTHENTICATION_REQUIRED)

def is_request_timeout_error(value):
    return has_status(value, Status.REQUEST_TIMEOUT)

def is_conflict_error(value):
    return has_status(value, Status.CONFLICT)

def is_gone_error(value):
    return has_status(value, Status.GONE)

def is_length_required_error(value):
    return has_status(value, Status.LENGTH_REQUIRED)

def is_precondition_failed_error(value):
    return has_status(value, Status.PRECONDITION_FAILED)

def is_payload_too_large_error(value):
    return has_status(value, Status.PAYLOAD_TOO_LARGE)

def is_uri_too_long_error(value):
    return has_status(value, Status.URI_TOO_LONG)

def is_unsupported_media_type_error(value):
    return has_status(value, Status.UNSUPPORTED_MEDIA_TYPE)

def is_range_not_satisfiable_error(value):
    return has_status(value, Status.RANGE_NOT_SATISFIABLE)

def is_expectation_failed_error(value):
    return has_status(value, Status.EXPECTATION_FAILED)

def is_i_am_a_teapot_error(value):
    return has_status(value, Status.I_AM_A_TEAPOT)

def is_misdirected_request_error(value):
    return has_status(value, Status.MISDIRECTED_REQUEST)

def is_unprocessable_entity_error(value):
    return has_status(value, Status.UNPROCESSABLE_ENTITY)

def is_locked_error(value):
    return has_status(value, Status.LOCKED)

def is_failed_dependency_error(value):
    return has_status(value, Status.FAILED_DEPENDENCY)

def is_too_early_error(value):
    return has_status(value, Status.TOO_EARLY)

def is_upgrade_required_error(value):
    return has_status(value, Status.UPGRADE_REQUIRED)

def is_precondition_required_error(value):
    return has_status(value, Status.PRECONDITION_REQUIRED)

def is_too_many_requests_error(value):
    return has_status(value, Status.TOO_MANY_REQUESTS)

def is_request_header_fields_too_large_error(value):
    return has_status(value, Status.REQUEST_HEADER_FIELDS_TOO_LARGE)

def is_unavailable_for_legal_reasons_error(value):
    return has_status(value, Status.UNAVAILABLE_FOR_LEGAL_REASONS)

# 5xx Error (Server error)
def is_internal_server_error(value):
    return has_status(value, Status.INTERNAL_SERVER_ERROR)

def is_not_implemented_error(value):
    return has_status(value, Status.NOT_IMPLEMENTED)

def is_bad_gateway_error(value):
    return has_status(value, Status.BAD_GATEWAY)

def is_service_unavailable_error(value):
    return has_status(value, Status.SERVICE_UNAVAILABLE)

def is_gateway_timeout_error(value):
    return has_status(value, Status.GATEWAY_TIMEOUT)

def is_http_version_not_supported_error(value):
    return has_status(value, Status.HTTP_VERSION_NOT_SUPPORTED)

def is_variant_also_negotiates_error(value):
    return has_status(value, Status.VARIANT_ALSO_NEGOTIATES)

def is_insufficient_storage_error(value):
    return has_status(value, Status.INSUFFICIENT_STORAGE)

def is_loop_detected_error(value):
    return has_status(value, Status.LOOP_DETECTED)

def is_not_extended_error(value):
    return has_status(value, Status.NOT_EXTENDED)

def is_network_authentication_required_error(value):
    return has_status(value, Status.NETWORK_AUTHENTICATION_REQUIRED)
