# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from http import HTTPStatus

from storefront.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class TokenVerificationError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, detail: str = "") -> None:
        super().__init__()
        self.detail = detail


class AuthRejectReason(str, Enum):
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    TOKEN_NOT_REGISTERED = "token_not_registered"
    TOKEN_EXPIRED = "token_expired"


class UnauthorizedError(DomainError):
    """Gate rejection. The reason is kept for logs and never sent to the caller."""

    code = "Unauthorized"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, reason: AuthRejectReason) -> None:
        super().__init__()
        self.reason = reason


class SessionIssueError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("internal_error")
