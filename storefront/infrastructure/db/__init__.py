# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import ENGINE, Base, SessionLocal, init_db, reset_db

__all__ = ["Base", "ENGINE", "SessionLocal", "init_db", "reset_db"]
