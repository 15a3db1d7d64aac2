"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from cart.domain.model.cart import Cart
from cart.domain.model.product import Product
from cart.domain.repository.cart_repository import CartRepository
from cart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from cart.infrastructure.persistence.json_store import Transaction


class JsonCartRepository(CartRepository):

    def __init__(self, tx: Transaction) -> None:
        self._tx = tx

    # --- CartRepository interface ---------------------------------------------

    def save_and_get_id(self, cart: Cart) -> int:
        return self._tx.insert(
            "cart", {"member_id": cart.member_id, "product_id": cart.product_id}
        )

    def find_all_products_by_member_id(self, member_id: int) -> list[Product]:
        products = {p.id: p for p in JsonProductRepository(self._tx).find_all()}
        return [
            products[raw["product_id"]]
            for raw in self._tx.rows("cart")
            if raw["member_id"] == member_id and raw["product_id"] in products
        ]

    def delete(self, product_id: int, member_id: int) -> int:
        rows = self._tx.rows("cart")
        for i, raw in enumerate(rows):
            if raw["product_id"] == product_id and raw["member_id"] == member_id:
                del rows[i]
                return 1
        return 0
