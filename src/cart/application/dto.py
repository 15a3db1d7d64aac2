"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from cart.domain.exceptions import FieldValidationError
from cart.domain.model.member import Member
from cart.domain.model.product import Product


@dataclass(frozen=True)
class ProductRequest:
    """Input: the fields a caller supplies to create or update a product."""

    name: str | None
    image: str | None
    price: int | None

    def validate(self) -> None:
        """Check every field and report all failures at once."""
        messages: list[str] = []
        if self.name is None or not self.name.strip():
            messages.append("상품명은 비어있을 수 없습니다.")
        if self.image is None or not self.image.strip():
            messages.append("상품 이미지는 비어있을 수 없습니다.")
        if self.price is None:
            messages.append("상품 가격은 필수입니다.")
        if messages:
            raise FieldValidationError(messages)

    def to_product(self, product_id: int | None = None) -> Product:
        self.validate()
        return Product(
            name=self.name.strip(),  # type: ignore[union-attr]
            image=self.image.strip(),  # type: ignore[union-attr]
            price=self.price,  # type: ignore[arg-type]
            id=product_id,
        )


@dataclass(frozen=True)
class ProductDto:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    image: str
    price: int

    @classmethod
    def from_product(cls, product: Product) -> ProductDto:
        return cls(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            image=product.image,
            price=product.price,
        )


@dataclass(frozen=True)
class MemberDto:
    """Output: a member without its credentials."""

    id: int
    email: str

    @classmethod
    def from_member(cls, member: Member) -> MemberDto:
        return cls(id=member.id, email=member.email)  # type: ignore[arg-type]
