"""Application service: cart use cases.

This is the only place that enforces rules spanning more than one
aggregate. The repositories stay dumb CRUD; every decision about what
counts as "not found" is made here.
"""

from __future__ import annotations

import logging

from cart.application.dto import ProductDto
from cart.domain.exceptions import CartError, ProductNotFoundError
from cart.domain.model.cart import Cart
from cart.domain.repository.cart_repository import CartRepository
from cart.domain.repository.member_repository import MemberRepository
from cart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

UNKNOWN_MEMBER_MESSAGE = "회원을 찾을 수 없습니다."


class CartService:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        member_repo: MemberRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._member_repo = member_repo

    def add(self, member_id: int, product_id: int) -> int:
        """Put a product into a member's cart and return the new cart ID.

        The same product may be added more than once; each call creates
        its own association row. Both the member and the product must
        exist.
        """
        if self._member_repo.find_by_id(member_id) is None:
            raise CartError(UNKNOWN_MEMBER_MESSAGE)
        if self._product_repo.find_by_id(product_id) is None:
            raise ProductNotFoundError()

        cart_id = self._cart_repo.save_and_get_id(
            Cart(member_id=member_id, product_id=product_id)
        )
        logger.info(
            "Added product %s to cart of member %s (cart #%s)",
            product_id, member_id, cart_id,
        )
        return cart_id

    def find_all_for_member(self, member_id: int) -> list[ProductDto]:
        products = self._cart_repo.find_all_products_by_member_id(member_id)
        return [ProductDto.from_product(p) for p in products]

    def delete(self, product_id: int, member_id: int) -> None:
        """Remove a product from a member's cart.

        Raises ProductNotFoundError when no association matched, including
        when it was already removed by an earlier call.
        """
        affected = self._cart_repo.delete(product_id, member_id)
        if affected == 0:
            raise ProductNotFoundError()
        logger.info(
            "Removed product %s from cart of member %s", product_id, member_id
        )
