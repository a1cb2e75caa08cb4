# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .entities import CartItem, Product


class ProductRepository(Protocol):
    def list_all(self) -> Sequence[Product]: ...
    def get_many(self, product_ids: Iterable[int]) -> dict[int, Product]: ...
    def add(self, name: str, price: float) -> Product: ...


class CartRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[CartItem]: ...
    def add_quantity(self, user_id: int, product_id: int, quantity: int) -> CartItem: ...
