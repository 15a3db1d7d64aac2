"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save_and_get_id(self, product: Product) -> int:
        """Persist a new product and return its generated ID."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def update(self, product: Product) -> int:
        """Overwrite a stored product. Returns the number of rows affected."""

    @abstractmethod
    def delete(self, product_id: int) -> int:
        """Remove a product. Returns the number of rows affected."""
