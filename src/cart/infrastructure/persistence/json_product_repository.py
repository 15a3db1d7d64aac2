"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from cart.domain.model.product import Product
from cart.domain.repository.product_repository import ProductRepository
from cart.infrastructure.persistence.json_store import Transaction


class JsonProductRepository(ProductRepository):

    def __init__(self, tx: Transaction) -> None:
        self._tx = tx

    # --- ProductRepository interface ------------------------------------------

    def save_and_get_id(self, product: Product) -> int:
        return self._tx.insert("product", self._to_raw(product))

    def find_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._tx.rows("product")]

    def find_by_id(self, product_id: int) -> Product | None:
        for raw in self._tx.rows("product"):
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def update(self, product: Product) -> int:
        rows = self._tx.rows("product")
        for i, raw in enumerate(rows):
            if raw["id"] == product.id:
                rows[i] = {"id": product.id, **self._to_raw(product)}
                return 1
        return 0

    def delete(self, product_id: int) -> int:
        rows = self._tx.rows("product")
        kept = [raw for raw in rows if raw["id"] != product_id]
        affected = len(rows) - len(kept)
        if affected:
            rows[:] = kept
            # Cart rows referencing the product go with it.
            carts = self._tx.rows("cart")
            carts[:] = [raw for raw in carts if raw["product_id"] != product_id]
        return affected

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "name": product.name,
            "image": product.image,
            "price": product.price,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            image=raw["image"],
            price=raw["price"],
        )
