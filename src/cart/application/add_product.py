"""Application service: Add Product use case."""

from __future__ import annotations

from cart.application.dto import ProductRequest
from cart.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: ProductRequest) -> int:
        """Add a new product to the catalog and return its ID."""
        product = request.to_product()
        return self._product_repo.save_and_get_id(product)
