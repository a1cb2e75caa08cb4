# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text

from storefront.infrastructure.db import ENGINE


def check_database() -> dict[str, str]:
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return {"database": "ok", "dialect": ENGINE.dialect.name}


__all__ = ["check_database"]
