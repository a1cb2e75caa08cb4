# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.domain.users.exceptions import UnauthorizedError
from storefront.shared.logging import logger


def _client_ip() -> str | None:
    return request.headers.get("X-Forwarded-For", request.remote_addr)


def current_user_id() -> int:
    """Identity attached by ``auth_required``; only valid inside protected views."""

    return int(g.user_id)


def auth_required(
    authenticate: AuthenticateRequestUseCase,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Guard a view with the access-token gate.

    The token is the raw ``Authorization`` header value, without a ``Bearer``
    prefix. Any rejection surfaces as 401 ``{"error": "Unauthorized"}``.
    """

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a, **kw):
            token = request.headers.get("Authorization", "")
            try:
                user_id = authenticate.execute(token)
            except UnauthorizedError as exc:
                logger.warning(
                    f"Auth failed ({exc.reason.value}) on {request.method} {request.path} "
                    f"from {_client_ip()}"
                )
                raise

            g.user_id = user_id
            g.access_token = token
            logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["auth_required", "current_user_id"]
