__version__ = "1.0.0"

from .status import Status, TITLES, title_from_code, is_registered
from .exceptions import *
from .factory import from_status_code, error_from_code, registered_variants, variant_for
from .predicates import *

__all__ = [
    "Status",
    "TITLES",
    title_from_code.__name__,
    is_registered.__name__,
    # Base
    HTTPException.__name__,
    HTTPClientError.__name__,
    HTTPServerError.__name__,
    InvalidStatusCode.__name__,
    InvalidInput.__name__,
    # 4xx Error (Client error)
    BadRequestError.__name__,
    UnauthorizedError.__name__,
    PaymentRequiredError.__name__,
    ForbiddenError.__name__,
    NotFoundError.__name__,
    MethodNotAllowedError.__name__,
    NotAcceptableError.__name__,
    ProxyAuthenticationRequiredError.__name__,
    RequestTimeoutError.__name__,
    ConflictError.__name__,
    GoneError.__name__,
    LengthRequiredError.__name__,
    PreconditionFailedError.__name__,
    PayloadTooLargeError.__name__,
    UriTooLongError.__name__,
    UnsupportedMediaTypeError.__name__,
    RangeNotSatisfiableError.__name__,
    ExpectationFailedError.__name__,
    IAmATeapotError.__name__,
    MisdirectedRequestError.__name__,
    UnprocessableEntityError.__name__,
    LockedError.__name__,
    FailedDependencyError.__name__,
    TooEarlyError.__name__,
    UpgradeRequiredError.__name__,
    PreconditionRequiredError.__name__,
    TooManyRequestsError.__name__,
    RequestHeaderFieldsTooLargeError.__name__,
    UnavailableForLegalReasonsError.__name__,
    # 5xx Error (Server error)
    InternalServerError.__name__,
    HTTPNotImplementedError.__name__,
    BadGatewayError.__name__,
    ServiceUnavailableError.__name__,
    GatewayTimeoutError.__name__,
    HTTPVersionNotSupportedError.__name__,
    VariantAlsoNegotiatesError.__name__,
    InsufficientStorageError.__name__,
    LoopDetectedError.__name__,
    NotExtendedError.__name__,
    NetworkAuthenticationRequiredError.__name__,
    # Factory
    from_status_code.__name__,
    "error_from_code",
    registered_variants.__name__,
    variant_for.__name__,
    # Predicates
    is_http_error.__name__,
    is_http_problem.__name__,
    is_client_error.__name__,
    is_server_error.__name__,
    has_status.__name__,
    is_bad_request_error.__name__,
    is_unauthorized_error.__name__,
    is_payment_required_error.__name__,
    is_forbidden_error.__name__,
    is_not_found_error.__name__,
    is_method_not_allowed_error.__name__,
    is_not_acceptable_error.__name__,
    is_proxy_authentication_required_error.__name__,
    is_request_timeout_error.__name__,
    is_conflict_error.__name__,
    is_gone_error.__name__,
    is_length_required_error.__name__,
    is_precondition_failed_error.__name__,
    is_payload_too_large_error.__name__,
    is_uri_too_long_error.__name__,
    is_unsupported_media_type_error.__name__,
    is_range_not_satisfiable_error.__name__,
    is_expectation_failed_error.__name__,
    is_i_am_a_teapot_error.__name__,
    is_misdirected_request_error.__name__,
    is_unprocessable_entity_error.__name__,
    is_locked_error.__name__,
    is_failed_dependency_error.__name__,
    is_too_early_error.__name__,
    is_upgrade_required_error.__name__,
    is_precondition_required_error.__name__,
    is_too_many_requests_error.__name__,
    is_request_header_fields_too_large_error.__name__,
    is_unavailable_for_legal_reasons_error.__name__,
    is_internal_server_error.__name__,
    is_not_implemented_error.__name__,
    is_bad_gateway_error.__name__,
    is_service_unavailable_error.__name__,
    is_gateway_timeout_error.__name__,
    is_http_version_not_supported_error.__name__,
    is_variant_also_negotiates_error.__name__,
    is_insufficient_storage_error.__name__,
    is_loop_detected_error.__name__,
    is_not_extended_error.__name__,
    is_network_authentication_required_error.__name__,
]
