# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.cart.add_to_cart import AddToCartUseCase
from .use_cases.cart.get_cart import GetCartUseCase
from .use_cases.products.create_product import CreateProductUseCase
from .use_cases.products.list_products import ListProductsUseCase
from .use_cases.sessions.authenticate_request import AuthenticateRequestUseCase
from .use_cases.sessions.issue_session import IssueSessionUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AddToCartUseCase",
    "AuthenticateRequestUseCase",
    "CreateProductUseCase",
    "GetCartUseCase",
    "IssueSessionUseCase",
    "ListProductsUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
]
