# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenPair:
    """One issued session as persisted in the credential store."""

    user_id: int
    access_token: str
    refresh_token: str
    expires_at: int
    id: int | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < int(now.timestamp())


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Claims recovered from a signature-valid token."""

    user_id: int
    expires_at: int


@dataclass(slots=True, frozen=True)
class SessionTokens:
    access_token: str
    refresh_token: str
    expires_at: int
