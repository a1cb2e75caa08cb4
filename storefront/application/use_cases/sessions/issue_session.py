# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from storefront.domain.users.entities import SessionTokens, TokenPair
from storefront.domain.users.exceptions import SessionIssueError
from storefront.domain.users.repositories import TokenCodec, TokenPairRepository
from storefront.shared.logging import logger


class IssueSessionUseCase:
    """Sign a fresh access/refresh pair and register it in the credential store.

    Earlier pairs of the same user are left alone, so a user may hold several
    live sessions at once.
    """

    def __init__(
        self,
        *,
        codec: TokenCodec,
        tokens: TokenPairRepository,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._codec = codec
        self._tokens = tokens
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._clock = clock

    def execute(self, user_id: int) -> SessionTokens:
        now = self._clock()
        expires_at = int((now + self._access_ttl).timestamp())
        try:
            access_token = self._codec.issue(user_id, self._access_ttl, now=now)
            refresh_token = self._codec.issue(user_id, self._refresh_ttl, now=now)
            self._tokens.add(
                TokenPair(
                    user_id=user_id,
                    access_token=access_token,
                    refresh_token=refresh_token,
                    expires_at=expires_at,
                )
            )
        except Exception as exc:
            logger.exception(f"session.issue: failed for user={user_id}")
            raise SessionIssueError() from exc

        logger.info(f"session.issue: ok user={user_id} exp={expires_at}")
        return SessionTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
        )
