# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog.entities import CartItem
from storefront.domain.catalog.repositories import CartRepository
from storefront.domain.exceptions import InvariantViolation


class AddToCartUseCase:
    def __init__(self, *, cart: CartRepository) -> None:
        self._cart = cart

    def execute(self, user_id: int, product_id: int, quantity: int) -> CartItem:
        if quantity < 0:
            raise InvariantViolation("quantity cannot be negative", field="quantity")
        return self._cart.add_quantity(user_id, product_id, quantity)
