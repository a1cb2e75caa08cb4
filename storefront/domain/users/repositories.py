# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol

from .entities import TokenClaims, TokenPair, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class TokenPairRepository(Protocol):
    def add(self, pair: TokenPair) -> TokenPair: ...
    def find_by_access_token(self, access_token: str) -> TokenPair | None: ...
    def list_for_user(self, user_id: int) -> list[TokenPair]: ...
    def revoke(self, access_token: str) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenCodec(Protocol):
    def issue(self, user_id: int, ttl: timedelta, *, now: datetime | None = None) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...
