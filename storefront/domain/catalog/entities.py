# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog and cart entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Product:
    id: int
    name: str
    price: float
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price}


@dataclass(slots=True, frozen=True)
class CartItem:
    """One (user, product) row; repeat adds accumulate into ``quantity``."""

    user_id: int
    product_id: int
    quantity: int
    id: int | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise InvariantViolation("quantity cannot be negative", field="quantity")


@dataclass(slots=True, frozen=True)
class CartLine:
    product: Product
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        payload = self.product.to_dict()
        payload["quantity"] = self.quantity
        return payload
