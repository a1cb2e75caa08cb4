# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors.base import DomainError


class InvariantViolationError(DomainError):
    code = "invariant_violation"

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(context={"field": field, "message": message} if field else None)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


InvariantViolation = InvariantViolationError
