"""Builds the JSON repositories and the cart service for one command.

Each CLI command enters ``repositories()`` once: the store's transaction
is opened there, and everything yielded is bound to it until the block
exits.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from cart.application.cart_service import CartService
from cart.infrastructure.config import Settings
from cart.infrastructure.persistence.json_cart_repository import JsonCartRepository
from cart.infrastructure.persistence.json_member_repository import (
    JsonMemberRepository,
)
from cart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from cart.infrastructure.persistence.json_store import JsonStore


@dataclass(frozen=True)
class Repositories:
    """Repositories bound to one open transaction."""

    products: JsonProductRepository
    members: JsonMemberRepository
    carts: JsonCartRepository

    def cart_service(self) -> CartService:
        return CartService(
            cart_repo=self.carts,
            product_repo=self.products,
            member_repo=self.members,
        )


@contextmanager
def repositories(settings: Settings) -> Iterator[Repositories]:
    """Open a transaction and yield repositories bound to it.

    The transaction commits when the block exits normally and rolls back
    when it raises.
    """
    store = JsonStore(settings.data_file)
    with store.transaction() as tx:
        yield Repositories(
            products=JsonProductRepository(tx),
            members=JsonMemberRepository(tx),
            carts=JsonCartRepository(tx),
        )
