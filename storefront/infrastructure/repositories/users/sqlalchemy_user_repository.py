# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.domain.users.entities import TokenPair as DomainTokenPair
from storefront.domain.users.entities import User as DomainUser
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import TokenPairRepository, UserRepository
from storefront.infrastructure.db.models import TokenPair, User
from storefront.infrastructure.unit_of_work import unit_of_work_scope


def _to_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


def _to_pair(row: TokenPair) -> DomainTokenPair:
    return DomainTokenPair(
        id=row.id,
        user_id=row.user_id,
        access_token=row.access_token,
        refresh_token=row.refresh_token,
        expires_at=int(row.expires_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_user(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_user(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc


class SqlAlchemyTokenPairRepository(TokenPairRepository):
    """Credential store backed by the ``tokens`` table."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, pair: DomainTokenPair) -> DomainTokenPair:
        with unit_of_work_scope(self._session_factory) as session:
            row = TokenPair(
                user_id=pair.user_id,
                access_token=pair.access_token,
                refresh_token=pair.refresh_token,
                expires_at=pair.expires_at,
            )
            session.add(row)
            session.flush()
            return _to_pair(row)

    def find_by_access_token(self, access_token: str) -> DomainTokenPair | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(TokenPair).where(TokenPair.access_token == access_token)
            ).first()
            return _to_pair(row) if row else None

    def list_for_user(self, user_id: int) -> list[DomainTokenPair]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(TokenPair).where(TokenPair.user_id == user_id).order_by(TokenPair.id)
            ).all()
            return [_to_pair(row) for row in rows]

    def revoke(self, access_token: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                delete(TokenPair).where(TokenPair.access_token == access_token)
            )
            return bool(result.rowcount)
