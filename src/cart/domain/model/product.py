"""Product aggregate.

Products live independently of carts. A Product can never exist in
memory in an invalid state: the invariants are checked on construction,
so an "update" is always a new, re-validated instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from cart.domain.exceptions import ErrorKind, ValidationError

MAX_NAME_LENGTH = 100
MIN_PRICE_VALUE = 0


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    name: str
    image: str
    price: int
    id: int | None = None

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"상품명의 길이는 {MAX_NAME_LENGTH}자 이하여야합니다.",
                ErrorKind.NAME_TOO_LONG,
            )
        if self.price < MIN_PRICE_VALUE:
            raise ValidationError(
                f"상품 가격은 {MIN_PRICE_VALUE}원 이상이여야 합니다.",
                ErrorKind.NEGATIVE_PRICE,
            )
