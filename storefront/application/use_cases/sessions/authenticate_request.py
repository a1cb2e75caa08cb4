# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from storefront.domain.users.exceptions import (AuthRejectReason, TokenVerificationError,
                                                UnauthorizedError)
from storefront.domain.users.repositories import TokenCodec, TokenPairRepository


class AuthenticateRequestUseCase:
    """Resolve the user behind a presented access token.

    A token must both carry a valid signature and still be registered in the
    credential store with an unexpired record. The store check is what lets a
    signature-valid token be invalidated before its ``exp`` claim runs out.
    """

    def __init__(
        self,
        *,
        codec: TokenCodec,
        tokens: TokenPairRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._codec = codec
        self._tokens = tokens
        self._clock = clock

    def execute(self, token: str | None) -> int:
        if not token:
            raise UnauthorizedError(AuthRejectReason.MISSING_TOKEN)

        try:
            claims = self._codec.verify(token)
        except TokenVerificationError as exc:
            raise UnauthorizedError(AuthRejectReason.INVALID_TOKEN) from exc

        record = self._tokens.find_by_access_token(token)
        if record is None:
            raise UnauthorizedError(AuthRejectReason.TOKEN_NOT_REGISTERED)

        if record.is_expired(self._clock()):
            raise UnauthorizedError(AuthRejectReason.TOKEN_EXPIRED)

        return claims.user_id
