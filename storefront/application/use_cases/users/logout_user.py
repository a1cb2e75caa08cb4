"""Use-case for revoking access tokens."""

from __future__ import annotations

from storefront.domain.users.repositories import TokenPairRepository


class LogoutUserUseCase:
    def __init__(self, *, tokens: TokenPairRepository) -> None:
        self._tokens = tokens

    def execute(self, access_token: str) -> bool:
        """Drop the pair registered for ``access_token``; other sessions stay live."""

        if not access_token:
            return False
        return self._tokens.revoke(access_token)
