# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.application.use_cases.sessions.issue_session import IssueSessionUseCase
from storefront.domain.users.entities import SessionTokens
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.domain.users.repositories import PasswordHasher, UserRepository
from storefront.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        issue_session: IssueSessionUseCase,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._issue_session = issue_session

    def execute(self, username: str, password: str) -> tuple[int, SessionTokens]:
        user = self._users.find_by_username(username)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: rejected username={username}")
            raise InvalidCredentialsError()

        return user.id, self._issue_session.execute(user.id)
