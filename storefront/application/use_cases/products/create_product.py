# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, name: str, price: float, *, created_by: int) -> Product:
        product = self._products.add(name, price)
        logger.info(f"products.create: id={product.id} by user={created_by}")
        return product
