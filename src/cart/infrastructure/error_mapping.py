"""Maps failures to client-visible responses.

Invariants:
    - Domain errors → the status registered for their kind, with their message
    - Field validation errors → 400, field messages joined with ", "
    - Anything else → 500 with a generic message, never internal details
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus

from cart.domain.exceptions import DomainException, ErrorKind

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "서버가 응답할 수 없습니다."

STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.NAME_TOO_LONG: HTTPStatus.BAD_REQUEST,
    ErrorKind.NEGATIVE_PRICE: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_FIELDS: HTTPStatus.BAD_REQUEST,
    ErrorKind.CART: HTTPStatus.BAD_REQUEST,
    ErrorKind.PRODUCT_NOT_FOUND: HTTPStatus.NOT_FOUND,
}


@dataclass(frozen=True)
class ErrorResponse:

    status: HTTPStatus
    message: str


def to_error_response(exc: Exception) -> ErrorResponse:
    if isinstance(exc, DomainException):
        status = STATUS_BY_KIND[exc.kind]
        logger.info("%s (%s): %s", exc.kind.value, status.value, exc.message)
        return ErrorResponse(status=status, message=exc.message)

    logger.error("Unhandled exception: %s", exc, exc_info=exc)
    return ErrorResponse(
        status=HTTPStatus.INTERNAL_SERVER_ERROR, message=SERVER_ERROR_MESSAGE
    )
