"""Domain-level exceptions.

Every business rule violation is a DomainException tagged with an
ErrorKind. The boundary resolves the response for a failure from its
kind alone, so adding a kind means adding one entry to the boundary's
status table.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NAME_TOO_LONG = "NAME_TOO_LONG"
    NEGATIVE_PRICE = "NEGATIVE_PRICE"
    INVALID_FIELDS = "INVALID_FIELDS"
    CART = "CART"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class ValidationError(DomainException):
    """A Product invariant was violated at construction time."""


class FieldValidationError(DomainException):
    """One or more input fields failed binding validation."""

    DELIMITER = ", "

    def __init__(self, field_messages: list[str]) -> None:
        self.field_messages = list(field_messages)
        super().__init__(
            self.DELIMITER.join(self.field_messages), ErrorKind.INVALID_FIELDS
        )


class CartError(DomainException):
    """Generic cart-logic failure."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.CART) -> None:
        super().__init__(message, kind)


class ProductNotFoundError(CartError):
    """The targeted product or cart association does not exist."""

    DEFAULT_MESSAGE = "상품을 찾을 수 없습니다."

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message, ErrorKind.PRODUCT_NOT_FOUND)
