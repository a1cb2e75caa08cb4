# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.domain.catalog.entities import CartItem as DomainCartItem
from storefront.domain.catalog.entities import Product as DomainProduct
from storefront.domain.catalog.repositories import CartRepository, ProductRepository
from storefront.infrastructure.db.models import CartItem, Product
from storefront.infrastructure.unit_of_work import unit_of_work_scope
from storefront.shared.logging import logger


def _to_product(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        price=float(row.price),
        created_at=row.created_at,
    )


def _to_cart_item(row: CartItem) -> DomainCartItem:
    return DomainCartItem(
        id=row.id,
        user_id=row.user_id,
        product_id=row.product_id,
        quantity=int(row.quantity),
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainProduct]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(select(Product).order_by(Product.id.asc())).all()
            return [_to_product(row) for row in rows]

    def get_many(self, product_ids: Iterable[int]) -> dict[int, DomainProduct]:
        ids = set(product_ids)
        if not ids:
            return {}
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(select(Product).where(Product.id.in_(ids))).all()
            return {row.id: _to_product(row) for row in rows}

    def add(self, name: str, price: float) -> DomainProduct:
        with unit_of_work_scope(self._session_factory) as session:
            row = Product(name=name, price=price)
            session.add(row)
            session.flush()
            return _to_product(row)


class SqlAlchemyCartRepository(CartRepository):
    """Cart rows keyed by (user_id, product_id).

    Increments are a single ``UPDATE ... SET quantity = quantity + n`` so two
    concurrent adds cannot lose an update. A racing first insert trips the
    ``u_user_product`` constraint and is folded into one more increment.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_for_user(self, user_id: int) -> Sequence[DomainCartItem]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(CartItem).where(CartItem.user_id == user_id).order_by(CartItem.id.asc())
            ).all()
            return [_to_cart_item(row) for row in rows]

    def add_quantity(self, user_id: int, product_id: int, quantity: int) -> DomainCartItem:
        try:
            return self._increment_or_insert(user_id, product_id, quantity)
        except IntegrityError:
            logger.info(
                f"cart: concurrent insert for user={user_id} product={product_id}, retrying as update"
            )
            return self._increment_or_insert(user_id, product_id, quantity)

    def _increment_or_insert(
        self, user_id: int, product_id: int, quantity: int
    ) -> DomainCartItem:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                update(CartItem)
                .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
                .values(quantity=CartItem.quantity + quantity)
                .execution_options(synchronize_session=False)
            )
            if not result.rowcount:
                session.add(CartItem(user_id=user_id, product_id=product_id, quantity=quantity))
                session.flush()
            row = session.scalars(
                select(CartItem)
                .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
                .execution_options(populate_existing=True)
            ).one()
            return _to_cart_item(row)
