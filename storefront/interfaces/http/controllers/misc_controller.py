# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request

from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.infrastructure.db import reset_db
from storefront.infrastructure.health import check_database
from storefront.shared.logging import logger


class MiscController:
    def __init__(self, *, allow_database_reset: bool = False) -> None:
        self._allow_database_reset = allow_database_reset

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        if self._allow_database_reset:
            bp.add_url_rule("/reset-database", view_func=self.reset_database, methods=["POST"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status.update(check_database())
        except Exception as exc:  # pragma: no cover
            logger.error(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status)

    def reset_database(self):
        reset_db()
        audit_log(AuditAction.DATABASE_RESET, ip_address=request.remote_addr)
        return jsonify({"message": "Database reset and reinitialized successfully"})
