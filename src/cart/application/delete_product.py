"""Application service: Delete Product use case."""

from __future__ import annotations

from cart.domain.exceptions import ProductNotFoundError
from cart.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if self._product_repo.delete(product_id) == 0:
            raise ProductNotFoundError()
