"""Cart association: one row per (member, product) pair.

A Cart owns nothing but the two foreign identifiers; it does not
control the lifecycle of either the member or the product.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cart:

    member_id: int
    product_id: int
    id: int | None = None
