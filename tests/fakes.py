"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import dataclasses

from cart.domain.model.cart import Cart
from cart.domain.model.member import Member
from cart.domain.model.product import Product
from cart.domain.repository.cart_repository import CartRepository
from cart.domain.repository.member_repository import MemberRepository
from cart.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save_and_get_id(p)

    def save_and_get_id(self, product: Product) -> int:
        product_id = self._next_id
        self._next_id += 1
        self._store[product_id] = dataclasses.replace(product, id=product_id)
        return product_id

    def find_all(self) -> list[Product]:
        return list(self._store.values())

    def find_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def update(self, product: Product) -> int:
        if product.id not in self._store:
            return 0
        self._store[product.id] = product
        return 1

    def delete(self, product_id: int) -> int:
        return 1 if self._store.pop(product_id, None) is not None else 0


class FakeCartRepository(CartRepository):

    def __init__(self, product_repo: FakeProductRepository) -> None:
        self._product_repo = product_repo
        self._rows: list[Cart] = []
        self._next_id = 1

    def save_and_get_id(self, cart: Cart) -> int:
        cart_id = self._next_id
        self._next_id += 1
        self._rows.append(Cart(member_id=cart.member_id, product_id=cart.product_id, id=cart_id))
        return cart_id

    def find_all_products_by_member_id(self, member_id: int) -> list[Product]:
        products = []
        for row in self._rows:
            if row.member_id != member_id:
                continue
            product = self._product_repo.find_by_id(row.product_id)
            if product is not None:
                products.append(product)
        return products

    def delete(self, product_id: int, member_id: int) -> int:
        for i, row in enumerate(self._rows):
            if row.product_id == product_id and row.member_id == member_id:
                del self._rows[i]
                return 1
        return 0


class FakeMemberRepository(MemberRepository):

    def __init__(self) -> None:
        self._store: dict[int, Member] = {}
        self._next_id = 1

    def save_and_get_id(self, member: Member) -> int:
        member_id = self._next_id
        self._next_id += 1
        self._store[member_id] = Member(
            email=member.email, password=member.password, id=member_id
        )
        return member_id

    def find_by_id(self, member_id: int) -> Member | None:
        return self._store.get(member_id)

    def find_all(self) -> list[Member]:
        return list(self._store.values())
