"""Integration tests for the product catalog use cases."""

import pytest

from cart.application.add_product import AddProductHandler
from cart.application.delete_product import DeleteProductHandler
from cart.application.dto import ProductDto, ProductRequest
from cart.application.list_products import ListProductsHandler
from cart.application.update_product import UpdateProductHandler
from cart.domain.exceptions import (
    ErrorKind,
    FieldValidationError,
    ProductNotFoundError,
    ValidationError,
)
from cart.domain.model.product import Product
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_assigns_id_and_persists(self):
        repo = FakeProductRepository()
        product_id = AddProductHandler(repo).handle(
            ProductRequest("pizza1", "pizza1.jpg", 8900)
        )
        assert product_id == 1
        assert repo.find_by_id(product_id) == Product("pizza1", "pizza1.jpg", 8900, id=1)

    def test_strips_whitespace(self):
        repo = FakeProductRepository()
        product_id = AddProductHandler(repo).handle(
            ProductRequest("  pizza1 ", " pizza1.jpg", 8900)
        )
        assert repo.find_by_id(product_id).name == "pizza1"

    def test_invalid_product_not_persisted(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError) as exc_info:
            AddProductHandler(repo).handle(ProductRequest("pizza", "pizza.jpg", -1))
        assert exc_info.value.kind is ErrorKind.NEGATIVE_PRICE
        assert repo.find_all() == []

    def test_blank_fields_reported_together(self):
        repo = FakeProductRepository()
        with pytest.raises(FieldValidationError) as exc_info:
            AddProductHandler(repo).handle(ProductRequest(" ", "", None))
        assert len(exc_info.value.field_messages) == 3
        assert exc_info.value.message == ", ".join(exc_info.value.field_messages)


class TestListProducts:

    def test_lists_as_dtos(self):
        repo = FakeProductRepository([
            Product("pizza1", "pizza1.jpg", 8900),
            Product("pizza2", "pizza2.jpg", 18900),
        ])
        assert ListProductsHandler(repo).handle() == [
            ProductDto(1, "pizza1", "pizza1.jpg", 8900),
            ProductDto(2, "pizza2", "pizza2.jpg", 18900),
        ]

    def test_empty_catalog(self):
        assert ListProductsHandler(FakeProductRepository()).handle() == []


class TestUpdateProduct:

    def test_replaces_fields_keeping_id(self):
        repo = FakeProductRepository([Product("pizza1", "pizza1.jpg", 8900)])
        UpdateProductHandler(repo).handle(1, ProductRequest("pasta", "pasta.jpg", 12000))
        assert repo.find_by_id(1) == Product("pasta", "pasta.jpg", 12000, id=1)

    def test_unknown_id_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(ProductNotFoundError):
            UpdateProductHandler(repo).handle(1, ProductRequest("pasta", "pasta.jpg", 12000))

    def test_invalid_update_leaves_product_unchanged(self):
        repo = FakeProductRepository([Product("pizza1", "pizza1.jpg", 8900)])
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle(1, ProductRequest("a" * 101, "a.jpg", 1))
        assert repo.find_by_id(1).name == "pizza1"


class TestDeleteProduct:

    def test_removes_product(self):
        repo = FakeProductRepository([Product("pizza1", "pizza1.jpg", 8900)])
        DeleteProductHandler(repo).handle(1)
        assert repo.find_by_id(1) is None

    def test_unknown_id_rejected(self):
        with pytest.raises(ProductNotFoundError):
            DeleteProductHandler(FakeProductRepository()).handle(1)
