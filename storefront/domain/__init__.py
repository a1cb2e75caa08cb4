# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .catalog.entities import CartItem, CartLine, Product
from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import SessionTokens, TokenClaims, TokenPair, User

__all__ = [
    "CartItem",
    "CartLine",
    "InvariantViolation",
    "InvariantViolationError",
    "Product",
    "SessionTokens",
    "TokenClaims",
    "TokenPair",
    "User",
]
