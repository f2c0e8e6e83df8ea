import pytest
from types import SimpleNamespace
from conftest import *
from httperror import predicates
from httperror.exceptions import *
from httperror.predicates import *

VARIANT_PREDICATES = [
    (BadRequestError,                       is_bad_request_error),
    (UnauthorizedError,                     is_unauthorized_error),
    (PaymentRequiredError,                  is_payment_required_error),
    (ForbiddenError,                        is_forbidden_error),
    (NotFoundError,                         is_not_found_error),
    (MethodNotAllowedError,                 is_method_not_allowed_error),
    (NotAcceptableError,                    is_not_acceptable_error),
    (ProxyAuthenticationRequiredError,      is_proxy_authentication_required_error),
    (RequestTimeoutError,                   is_request_timeout_error),
    (ConflictError,                         is_conflict_error),
    (GoneError,                             is_gone_error),
    (LengthRequiredError,                   is_length_required_error),
    (PreconditionFailedError,               is_precondition_failed_error),
    (PayloadTooLargeError,                  is_payload_too_large_error),
    (UriTooLongError,                       is_uri_too_long_error),
    (UnsupportedMediaTypeError,             is_unsupported_media_type_error),
    (RangeNotSatisfiableError,              is_range_not_satisfiable_error),
    (ExpectationFailedError,                is_expectation_failed_error),
    (IAmATeapotError,                       is_i_am_a_teapot_error),
    (MisdirectedRequestError,               is_misdirected_request_error),
    (UnprocessableEntityError,              is_unprocessable_entity_error),
    (LockedError,                           is_locked_error),
    (FailedDependencyError,                 is_failed_dependency_error),
    (TooEarlyError,                         is_too_early_error),
    (UpgradeRequiredError,                  is_upgrade_required_error),
    (PreconditionRequiredError,             is_precondition_required_error),
    (TooManyRequestsError,                  is_too_many_requests_error),
    (RequestHeaderFieldsTooLargeError,      is_request_header_fields_too_large_error),
    (UnavailableForLegalReasonsError,       is_unavailable_for_legal_reasons_error),
    (InternalServerError,                   is_internal_server_error),
    (HTTPNotImplementedError,               is_not_implemented_error),
    (BadGatewayError,                       is_bad_gateway_error),
    (ServiceUnavailableError,               is_service_unavailable_error),
    (GatewayTimeoutError,                   is_gateway_timeout_error),
    (HTTPVersionNotSupportedError,          is_http_version_not_supported_error),
    (VariantAlsoNegotiatesError,            is_variant_also_negotiates_error),
    (InsufficientStorageError,              is_insufficient_storage_error),
    (LoopDetectedError,                     is_loop_detected_error),
    (NotExtendedError,                      is_not_extended_error),
    (NetworkAuthenticationRequiredError,    is_network_authentication_required_error),
]
ALL_VARIANT_PREDICATES = [x[1] for x in VARIANT_PREDICATES]

NOT_HTTP_ERRORS = [
    None,
    ValueError("x"),
    object(),
    {},
    {"http_status": "404"},
    {"http_status": 404.0},
    {"http_status": None},
    {"http_status": True},
    SimpleNamespace(status_code=404),
    404,
    "404",
]


def test_variant_predicates_cover_registry():
    assert(len(VARIANT_PREDICATES) == 40)
    assert(
        sorted(cls().http_status for cls, _ in VARIANT_PREDICATES)
        == sorted(REGISTERED_CODES)
    )

@pytest.mark.parametrize(
    "cls, predicate", VARIANT_PREDICATES
)
def test_exactly_one_variant_predicate(cls, predicate):
    e = cls()
    matched = [p for p in ALL_VARIANT_PREDICATES if p(e)]
    assert(matched == [predicate])

@pytest.mark.parametrize(
    "cls, predicate", VARIANT_PREDICATES
)
def test_variant_predicate_is_status_equality(cls, predicate):
    code = cls().http_status
    assert(predicate({"http_status": code}))
    assert(predicate(SimpleNamespace(http_status=code)))
    assert(not predicate({"http_status": code + 1000}))

def test_predicate_ignores_concrete_class():
    class Impostor(ConflictError):
        @property
        def http_status(self):
            return 404

    e = Impostor()
    assert(is_not_found_error(e))
    assert(not is_conflict_error(e))

def test_plain_value_without_title():
    value = {"http_status": 404}
    assert(is_http_error(value))
    assert(is_not_found_error(value))
    assert(not is_http_problem(value))

def test_plain_object_without_title():
    value = SimpleNamespace(http_status=404)
    assert(is_http_error(value))
    assert(is_not_found_error(value))
    assert(not is_http_problem(value))

def test_http_problem():
    assert(is_http_problem(NotFoundError()))
    assert(is_http_problem({"http_status": 404, "title": "Not Found"}))
    assert(not is_http_problem({"http_status": 404, "title": None}))
    assert(not is_http_problem({"title": "Not Found"}))

@pytest.mark.parametrize(
    "value", NOT_HTTP_ERRORS
)
def test_not_http_error(value):
    assert(is_http_error(value) is False)
    assert(is_http_problem(value) is False)
    assert(is_client_error(value) is False)
    assert(is_server_error(value) is False)
    for predicate in ALL_VARIANT_PREDICATES:
        assert(predicate(value) is False)

def test_http_error_any_range():
    assert(is_http_error({"http_status": 200}))
    assert(is_http_error({"http_status": 999}))
    assert(not is_client_error({"http_status": 200}))
    assert(not is_server_error({"http_status": 999}))

@pytest.mark.parametrize(
    "code", CLIENT_CODES
)
def test_client_error(code):
    e = variant_instance(code)
    assert(is_client_error(e))
    assert(not is_server_error(e))

@pytest.mark.parametrize(
    "code", SERVER_CODES
)
def test_server_error(code):
    e = variant_instance(code)
    assert(is_server_error(e))
    assert(not is_client_error(e))

@pytest.mark.parametrize(
    "code, client, server", [
    (399, False, False),
    (400, True, False),
    (499, True, False),
    (500, False, True),
    (599, False, True),
    (600, False, False),
])
def test_category_bounds(code, client, server):
    value = {"http_status": code}
    assert(is_client_error(value) is client)
    assert(is_server_error(value) is server)

def test_has_status():
    assert(has_status(NotFoundError(), 404))
    assert(not has_status(NotFoundError(), 410))
    assert(not has_status(None, 404))

def test_module_exposes_all_variant_predicates():
    names = [
        name for name in dir(predicates)
        if name.startswith("is_") and name.endswith("_error")
        and name not in ("is_http_error", "is_client_error", "is_server_error")
    ]
    assert(len(names) == 40)

def variant_instance(code):
    for cls, _ in VARIANT_PREDICATES:
        if cls().http_status == code:
            return cls()
    raise KeyError(code)

class _RaisingStatus:
    @property
    def http_status(self):
        raise RuntimeError("boom")

class _RaisingMapping(dict):
    def get(self, key, default=None):
        raise RuntimeError("boom")

@pytest.mark.parametrize(
    "value", [
    _RaisingStatus(),
    _RaisingMapping(http_status=404),
])
def test_raising_lookup_is_not_http_error(value):
    assert(is_http_error(value) is False)
    assert(is_http_problem(value) is False)
    assert(is_client_error(value) is False)
    assert(is_not_found_error(value) is False)

def test_raising_title_is_not_http_problem():
    class RaisingTitle:
        http_status = 404

        @property
        def title(self):
            raise RuntimeError("boom")

    assert(is_http_error(RaisingTitle()))
    assert(not is_http_problem(RaisingTitle()))
