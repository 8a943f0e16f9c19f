"""
Stable error codes returned by use cases, with the kind (and HTTP status
class) each one belongs to.
"""

from enum import Enum

from videogen_auth.libs.result import Error


class ErrorKind(str, Enum):
    validation = "validation"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    not_found = "not_found"
    conflict = "conflict"
    internal = "internal"


KIND_STATUS = {
    ErrorKind.validation: 400,
    ErrorKind.unauthorized: 401,
    ErrorKind.forbidden: 403,
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
    ErrorKind.internal: 500,
}


EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
USER_NOT_FOUND = "USER_NOT_FOUND"
EMAIL_ALREADY_VERIFIED = "EMAIL_ALREADY_VERIFIED"
VERIFICATION_CODE_MISSING = "VERIFICATION_CODE_MISSING"
VERIFICATION_CODE_EXPIRED = "VERIFICATION_CODE_EXPIRED"
INVALID_VERIFICATION_CODE = "INVALID_VERIFICATION_CODE"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
INVALID_TOKEN = "INVALID_TOKEN"
TOKEN_EXPIRED = "TOKEN_EXPIRED"
INVALID_RESET_CODE = "INVALID_RESET_CODE"
INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
EMAIL_DELIVERY_FAILED = "EMAIL_DELIVERY_FAILED"
VALIDATION_ERROR = "VALIDATION_ERROR"

ERROR_KINDS = {
    EMAIL_ALREADY_EXISTS: ErrorKind.conflict,
    USER_NOT_FOUND: ErrorKind.not_found,
    EMAIL_ALREADY_VERIFIED: ErrorKind.validation,
    VERIFICATION_CODE_MISSING: ErrorKind.unauthorized,
    VERIFICATION_CODE_EXPIRED: ErrorKind.unauthorized,
    INVALID_VERIFICATION_CODE: ErrorKind.unauthorized,
    INVALID_CREDENTIALS: ErrorKind.unauthorized,
    EMAIL_NOT_VERIFIED: ErrorKind.unauthorized,
    INVALID_TOKEN: ErrorKind.unauthorized,
    TOKEN_EXPIRED: ErrorKind.unauthorized,
    INVALID_RESET_CODE: ErrorKind.unauthorized,
    INCORRECT_PASSWORD: ErrorKind.unauthorized,
    EMAIL_DELIVERY_FAILED: ErrorKind.internal,
    VALIDATION_ERROR: ErrorKind.validation,
}


def kind_of(error: Error) -> ErrorKind:
    # Unknown codes are treated as internal faults
    return ERROR_KINDS.get(error.code, ErrorKind.internal)


def status_of(error: Error) -> int:
    return KIND_STATUS[kind_of(error)]
