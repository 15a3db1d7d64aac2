"""Unit tests for the Product aggregate."""

import dataclasses

import pytest

from cart.domain.exceptions import ErrorKind, ValidationError
from cart.domain.model.product import MAX_NAME_LENGTH, Product


class TestProductCreation:

    def test_valid_product(self):
        p = Product("pizza1", "pizza1.jpg", 8900)
        assert p.name == "pizza1"
        assert p.image == "pizza1.jpg"
        assert p.price == 8900

    def test_id_absent_until_persisted(self):
        assert Product("pizza1", "pizza1.jpg", 8900).id is None

    def test_persisted_product_keeps_fields(self):
        p = Product("pizza1", "pizza1.jpg", 8900, id=7)
        assert p.id == 7
        assert p.name == "pizza1"

    def test_name_at_limit_accepted(self):
        p = Product("a" * MAX_NAME_LENGTH, "a.jpg", 1000)
        assert len(p.name) == 100

    def test_zero_price_accepted(self):
        assert Product("free", "free.jpg", 0).price == 0

    def test_image_is_unconstrained(self):
        assert Product("pizza", "", 100).image == ""


class TestProductInvariants:

    @pytest.mark.parametrize("length", [101, 150, 1000])
    def test_long_name_rejected(self, length):
        with pytest.raises(ValidationError, match="100자 이하") as exc_info:
            Product("a" * length, "a.jpg", 1000)
        assert exc_info.value.kind is ErrorKind.NAME_TOO_LONG

    @pytest.mark.parametrize("price", [-1, -8900])
    def test_negative_price_rejected(self, price):
        with pytest.raises(ValidationError, match="0원 이상") as exc_info:
            Product("pizza", "pizza.jpg", price)
        assert exc_info.value.kind is ErrorKind.NEGATIVE_PRICE

    def test_immutable(self):
        p = Product("pizza", "pizza.jpg", 100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.price = -1  # type: ignore[misc]
