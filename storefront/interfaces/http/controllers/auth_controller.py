# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request

from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.logout_user import LogoutUserUseCase
from storefront.application.use_cases.users.register_user import \
    RegisterUserUseCase
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.interfaces.http.auth_gate import auth_required, current_user_id
from storefront.interfaces.http.dto.auth import (LoginRequestDTO, MessageDTO,
                                                 RegisterRequestDTO, TokenPairDTO)
from storefront.shared.errors.validation import parse_body
from storefront.shared.logging import logger
from storefront.shared.middleware.rate_limit import rate_limit


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        authenticate: AuthenticateRequestUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._authenticate = authenticate

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO, request.get_json(silent=True))

        user = self._register_use_case.execute(dto.username, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            details={"username": dto.username},
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="User registered successfully").model_dump()
        return jsonify(payload), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO, request.get_json(silent=True))
        ip_address = _get_client_ip()

        try:
            user_id, session = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user_id,
            ip_address=ip_address,
            details={"username": dto.username},
        )
        logger.info(f"auth.login: ok user_id={user_id}")
        payload = TokenPairDTO(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        ).model_dump()
        return jsonify(payload), 200

    def logout(self) -> tuple[Response, int]:
        user_id = current_user_id()
        self._logout_use_case.execute(g.access_token)

        audit_log(AuditAction.LOGOUT, user_id=user_id, ip_address=_get_client_ip())
        logger.info(f"auth.logout: ok user_id={user_id}")
        return jsonify(MessageDTO(message="Logged out").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        protected = auth_required(self._authenticate)
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=protected(self.logout), methods=["POST"])
        return bp
