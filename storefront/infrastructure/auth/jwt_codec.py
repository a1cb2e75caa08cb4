# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed token codec built on PyJWT.

Tokens carry ``user_id``, ``exp`` and a random ``jti`` so that two tokens
issued for the same user within the same second still differ. ``verify``
checks signature and structure only; the ``exp`` claim is returned to the
caller but not enforced here.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from storefront.domain.users.entities import TokenClaims
from storefront.domain.users.exceptions import TokenVerificationError
from storefront.domain.users.repositories import TokenCodec

_REQUIRED_CLAIMS = ("user_id", "exp")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenCodec(TokenCodec):
    def __init__(
        self,
        secret: bytes | str,
        *,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, user_id: int, ttl: timedelta, *, now: datetime | None = None) -> str:
        issued_at = now or self._clock()
        payload = {
            "user_id": int(user_id),
            "exp": int((issued_at + ttl).timestamp()),
            "jti": secrets.token_urlsafe(16),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "require": list(_REQUIRED_CLAIMS)},
            )
        except jwt.PyJWTError as exc:
            raise TokenVerificationError(type(exc).__name__) from exc

        user_id = claims["user_id"]
        expires_at = claims["exp"]
        # bool is an int subclass; a JSON true must not pass as user 1
        for name, value in (("user_id", user_id), ("exp", expires_at)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TokenVerificationError(f"claim {name} is not an integer")

        return TokenClaims(user_id=user_id, expires_at=expires_at)


__all__ = ["JwtTokenCodec"]
