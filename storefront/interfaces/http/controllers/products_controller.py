# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from storefront.application.use_cases.products.create_product import \
    CreateProductUseCase
from storefront.application.use_cases.products.list_products import \
    ListProductsUseCase
from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.interfaces.http.auth_gate import auth_required, current_user_id
from storefront.interfaces.http.dto.catalog import CreateProductRequestDTO
from storefront.shared.errors.validation import parse_body


class ProductsController:
    def __init__(
        self,
        *,
        list_products: ListProductsUseCase,
        create_product: CreateProductUseCase,
        authenticate: AuthenticateRequestUseCase,
    ) -> None:
        self._list_products = list_products
        self._create_product = create_product
        self._authenticate = authenticate

    def list_products(self) -> tuple[Response, int]:
        products = self._list_products.execute()
        return jsonify([product.to_dict() for product in products]), 200

    def create(self) -> tuple[Response, int]:
        dto = parse_body(CreateProductRequestDTO, request.get_json(silent=True))
        user_id = current_user_id()
        product = self._create_product.execute(dto.name, dto.price, created_by=user_id)
        audit_log(
            AuditAction.PRODUCT_CREATED,
            user_id=user_id,
            details={"product_id": product.id},
        )
        return jsonify(product.to_dict()), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/products")
        bp.add_url_rule("", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule(
            "", view_func=auth_required(self._authenticate)(self.create), methods=["POST"]
        )
        return bp
