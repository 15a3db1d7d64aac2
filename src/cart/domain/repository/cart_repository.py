"""Abstract repository for the Cart association.

The port stays a plain CRUD contract. It never decides whether a
missing row is an error; it reports how many rows an operation touched
and leaves that decision to the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.cart import Cart
from cart.domain.model.product import Product


class CartRepository(ABC):

    @abstractmethod
    def save_and_get_id(self, cart: Cart) -> int:
        """Persist a new association and return its generated ID."""

    @abstractmethod
    def find_all_products_by_member_id(self, member_id: int) -> list[Product]:
        """Return the products in a member's cart, in insertion order."""

    @abstractmethod
    def delete(self, product_id: int, member_id: int) -> int:
        """Remove the association for the pair. Returns rows affected (0 if absent)."""
