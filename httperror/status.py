from enum import IntEnum
from types import MappingProxyType

MIN_ERROR_STATUS = 400
MAX_ERROR_STATUS = 511

CLIENT_ERROR_RANGE = range(400, 500)
SERVER_ERROR_RANGE = range(500, 600)

class Status(IntEnum):
    # 4xx Error (Client error)
    BAD_REQUEST                         = 400
    UNAUTHORIZED                        = 401
    PAYMENT_REQUIRED                    = 402
    FORBIDDEN                           = 403
    NOT_FOUND                           = 404
    METHOD_NOT_ALLOWED                  = 405
    NOT_ACCEPTABLE                      = 406
    PROXY_AUTHENTICATION_REQUIRED       = 407
    REQUEST_TIMEOUT                     = 408
    CONFLICT                            = 409
    GONE                                = 410
    LENGTH_REQUIRED                     = 411
    PRECONDITION_FAILED                 = 412
    PAYLOAD_TOO_LARGE                   = 413
    URI_TOO_LONG                        = 414
    UNSUPPORTED_MEDIA_TYPE              = 415
    RANGE_NOT_SATISFIABLE               = 416
    EXPECTATION_FAILED                  = 417
    I_AM_A_TEAPOT                       = 418
    MISDIRECTED_REQUEST                 = 421
    UNPROCESSABLE_ENTITY                = 422
    LOCKED                              = 423
    FAILED_DEPENDENCY                   = 424
    TOO_EARLY                           = 425
    UPGRADE_REQUIRED                    = 426
    PRECONDITION_REQUIRED               = 428
    TOO_MANY_REQUESTS                   = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE     = 431
    UNAVAILABLE_FOR_LEGAL_REASONS       = 451

    # 5xx Error (Server error)
    INTERNAL_SERVER_ERROR               = 500
    NOT_IMPLEMENTED                     = 501
    BAD_GATEWAY                         = 502
    SERVICE_UNAVAILABLE                 = 503
    GATEWAY_TIMEOUT                     = 504
    HTTP_VERSION_NOT_SUPPORTED          = 505
    VARIANT_ALSO_NEGOTIATES             = 506
    INSUFFICIENT_STORAGE                = 507
    LOOP_DETECTED                       = 508
    NOT_EXTENDED                        = 510
    NETWORK_AUTHENTICATION_REQUIRED     = 511

TITLES = MappingProxyType({
    #   STATUS                                      TITLE
    Status.BAD_REQUEST:                         "Bad Request",
    Status.UNAUTHORIZED:                        "Unauthorized",
    Status.PAYMENT_REQUIRED:                    "Payment Required",
    Status.FORBIDDEN:                           "Forbidden",
    Status.NOT_FOUND:                           "Not Found",
    Status.METHOD_NOT_ALLOWED:                  "Method Not Allowed",
    Status.NOT_ACCEPTABLE:                      "Not Acceptable",
    Status.PROXY_AUTHENTICATION_REQUIRED:       "Proxy Authentication Required",
    Status.REQUEST_TIMEOUT:                     "Request Timeout",
    Status.CONFLICT:                            "Conflict",
    Status.GONE:                                "Gone",
    Status.LENGTH_REQUIRED:                     "Length Required",
    Status.PRECONDITION_FAILED:                 "Precondition Failed",
    Status.PAYLOAD_TOO_LARGE:                   "Payload Too Large",
    Status.URI_TOO_LONG:                        "URI Too Long",
    Status.UNSUPPORTED_MEDIA_TYPE:              "Unsupported Media Type",
    Status.RANGE_NOT_SATISFIABLE:               "Range Not Satisfiable",
    Status.EXPECTATION_FAILED:                  "Expectation Failed",
    Status.I_AM_A_TEAPOT:                       "I am a teapot",
    Status.MISDIRECTED_REQUEST:                 "Misdirected Request",
    Status.UNPROCESSABLE_ENTITY:                "Unprocessable Entity",
    Status.LOCKED:                              "Locked",
    Status.FAILED_DEPENDENCY:                   "Failed Dependency",
    Status.TOO_EARLY:                           "Too Early",
    Status.UPGRADE_REQUIRED:                    "Upgrade Required",
    Status.PRECONDITION_REQUIRED:               "Precondition Required",
    Status.TOO_MANY_REQUESTS:                   "Too Many Requests",
    Status.REQUEST_HEADER_FIELDS_TOO_LARGE:     "Request Header Fields Too Large",
    Status.UNAVAILABLE_FOR_LEGAL_REASONS:       "Unavailable For Legal Reasons",
    Status.INTERNAL_SERVER_ERROR:               "Internal Server Error",
    Status.NOT_IMPLEMENTED:                     "Not Implemented",
    Status.BAD_GATEWAY:                         "Bad Gateway",
    Status.SERVICE_UNAVAILABLE:                 "Service Unavailable",
    Status.GATEWAY_TIMEOUT:                     "Gateway Timeout",
    Status.HTTP_VERSION_NOT_SUPPORTED:          "HTTP Version Not Supported",
    Status.VARIANT_ALSO_NEGOTIATES:             "Variant Also Negotiates",
    Status.INSUFFICIENT_STORAGE:                "Insufficient Storage",
    Status.LOOP_DETECTED:                       "Loop Detected",
    Status.NOT_EXTENDED:                        "Not Extended",
    Status.NETWORK_AUTHENTICATION_REQUIRED:     "Network Authentication Required",
})

def _is_int(code):
    return isinstance(code, int) and not isinstance(code, bool)

def is_registered(code):
    if not _is_int(code):
        return False
    return code in TITLES

def title_from_code(code):
    if not _is_int(code):
        raise TypeError(
            "code must be int type."
        )
    if code not in TITLES:
        raise ValueError(
            f"unregistered status code. ({code})"
        )
    return TITLES[Status(code)]
