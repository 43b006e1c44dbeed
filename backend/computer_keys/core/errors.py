"""Error Taxonomy: the closed set of failure kinds and their HTTP mapping.

Invariants:
    - ErrorKind is closed: services never invent a failure outside this enum
    - Every kind maps to exactly one HTTP status (http_status)
    - reason_phrase() is the standard phrase for a status ("Not Found", "Forbidden", ...)

Design Decisions:
    - str Enum: kinds serialize to JSON and log extras without custom encoders
    - Status table lives next to the enum so the translator has no mapping of its own
"""

from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    """Every failure a request can end in."""
    VALIDATION = "VALIDATION"
    MODEL_REQUIRED = "MODEL_REQUIRED"
    MAKER_NOT_FOUND = "MAKER_NOT_FOUND"
    COMPUTER_NOT_FOUND = "COMPUTER_NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    INVALID_SSH_KEY = "INVALID_SSH_KEY"
    KEY_ALREADY_EXISTS = "KEY_ALREADY_EXISTS"
    INTERNAL = "INTERNAL"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.MODEL_REQUIRED: HTTPStatus.FORBIDDEN,
    ErrorKind.MAKER_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.COMPUTER_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: HTTPStatus.BAD_REQUEST,
    ErrorKind.KEY_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.INVALID_SSH_KEY: HTTPStatus.BAD_REQUEST,
    ErrorKind.KEY_ALREADY_EXISTS: HTTPStatus.BAD_REQUEST,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase for a status code, e.g. 404 -> 'Not Found'."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"
