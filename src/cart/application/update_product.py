"""Application service: Update Product use case."""

from __future__ import annotations

from cart.application.dto import ProductRequest
from cart.domain.exceptions import ProductNotFoundError
from cart.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, request: ProductRequest) -> None:
        """Replace a product's name, image and price.

        Products are immutable, so the stored product is replaced by a
        freshly validated instance carrying the same ID.
        """
        if self._product_repo.find_by_id(product_id) is None:
            raise ProductNotFoundError()

        self._product_repo.update(request.to_product(product_id))
