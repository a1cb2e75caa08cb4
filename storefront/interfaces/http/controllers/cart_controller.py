# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from storefront.application.use_cases.cart.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.cart.get_cart import GetCartUseCase
from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.interfaces.http.auth_gate import auth_required, current_user_id
from storefront.interfaces.http.dto.auth import MessageDTO
from storefront.interfaces.http.dto.catalog import AddToCartRequestDTO
from storefront.shared.errors.validation import parse_body
from storefront.shared.logging import logger


class CartController:
    def __init__(
        self,
        *,
        get_cart: GetCartUseCase,
        add_to_cart: AddToCartUseCase,
        authenticate: AuthenticateRequestUseCase,
    ) -> None:
        self._get_cart = get_cart
        self._add_to_cart = add_to_cart
        self._authenticate = authenticate

    def get_cart(self) -> tuple[Response, int]:
        lines = self._get_cart.execute(current_user_id())
        return jsonify([line.to_dict() for line in lines]), 200

    def add(self) -> tuple[Response, int]:
        dto = parse_body(AddToCartRequestDTO, request.get_json(silent=True))
        user_id = current_user_id()
        item = self._add_to_cart.execute(user_id, dto.product_id, dto.quantity)
        logger.info(
            f"cart.add: user={user_id} product={item.product_id} quantity={item.quantity}"
        )
        return jsonify(MessageDTO(message="Item added to cart successfully").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        protected = auth_required(self._authenticate)
        bp = Blueprint("cart", __name__, url_prefix="/cart")
        bp.add_url_rule("", view_func=protected(self.get_cart), methods=["GET"])
        bp.add_url_rule("/add", view_func=protected(self.add), methods=["POST"])
        return bp
