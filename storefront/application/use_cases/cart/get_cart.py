# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog.entities import CartLine
from storefront.domain.catalog.repositories import CartRepository, ProductRepository
from storefront.shared.logging import logger


class GetCartUseCase:
    def __init__(self, *, cart: CartRepository, products: ProductRepository) -> None:
        self._cart = cart
        self._products = products

    def execute(self, user_id: int) -> list[CartLine]:
        items = self._cart.list_for_user(user_id)
        products = self._products.get_many(item.product_id for item in items)

        lines: list[CartLine] = []
        for item in items:
            product = products.get(item.product_id)
            if product is None:
                logger.debug(
                    f"cart.get: skipping missing product={item.product_id} user={user_id}"
                )
                continue
            lines.append(CartLine(product=product, quantity=item.quantity))
        return lines
