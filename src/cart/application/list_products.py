"""Application service: List Products use case (query)."""

from __future__ import annotations

from cart.application.dto import ProductDto
from cart.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDto]:
        return [ProductDto.from_product(p) for p in self._product_repo.find_all()]
