# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from storefront.application.services.password_hashing import \
    WerkzeugPasswordHasher
from storefront.application.use_cases.cart.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.cart.get_cart import GetCartUseCase
from storefront.application.use_cases.products.create_product import \
    CreateProductUseCase
from storefront.application.use_cases.products.list_products import \
    ListProductsUseCase
from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.application.use_cases.sessions.issue_session import \
    IssueSessionUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.logout_user import LogoutUserUseCase
from storefront.application.use_cases.users.register_user import \
    RegisterUserUseCase
from storefront.infrastructure.auth.jwt_codec import JwtTokenCodec
from storefront.infrastructure.db import SessionLocal
from storefront.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyCartRepository, SqlAlchemyProductRepository)
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyTokenPairRepository, SqlAlchemyUserRepository)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.cart_controller import CartController
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.interfaces.http.controllers.products_controller import \
    ProductsController
from storefront.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    # Infrastructure

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(
            self._config.signing_key,
            algorithm=self._config.auth.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def token_pair_repository(self) -> SqlAlchemyTokenPairRepository:
        return SqlAlchemyTokenPairRepository(SessionLocal)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(SessionLocal)

    @cached_property
    def cart_repository(self) -> SqlAlchemyCartRepository:
        return SqlAlchemyCartRepository(SessionLocal)

    # Sessions

    @cached_property
    def issue_session_use_case(self) -> IssueSessionUseCase:
        return IssueSessionUseCase(
            codec=self.token_codec,
            tokens=self.token_pair_repository,
            access_ttl=self._config.auth.access_ttl,
            refresh_ttl=self._config.auth.refresh_ttl,
        )

    @cached_property
    def authenticate_request_use_case(self) -> AuthenticateRequestUseCase:
        return AuthenticateRequestUseCase(
            codec=self.token_codec,
            tokens=self.token_pair_repository,
        )

    # Users

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            issue_session=self.issue_session_use_case,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.token_pair_repository)

    # Catalog

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(products=self.product_repository)

    @cached_property
    def create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(products=self.product_repository)

    @cached_property
    def get_cart_use_case(self) -> GetCartUseCase:
        return GetCartUseCase(cart=self.cart_repository, products=self.product_repository)

    @cached_property
    def add_to_cart_use_case(self) -> AddToCartUseCase:
        return AddToCartUseCase(cart=self.cart_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            authenticate=self.authenticate_request_use_case,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            list_products=self.list_products_use_case,
            create_product=self.create_product_use_case,
            authenticate=self.authenticate_request_use_case,
        )

    @cached_property
    def cart_controller(self) -> CartController:
        return CartController(
            get_cart=self.get_cart_use_case,
            add_to_cart=self.add_to_cart_use_case,
            authenticate=self.authenticate_request_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        allow_reset = self._config.allow_database_reset and not self._config.is_production()
        return MiscController(allow_database_reset=allow_reset)
