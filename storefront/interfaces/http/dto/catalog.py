# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt


class AddToCartRequestDTO(BaseModel):
    product_id: NonNegativeInt
    quantity: NonNegativeInt


class CreateProductRequestDTO(BaseModel):
    name: str = Field(min_length=1)
    price: float
