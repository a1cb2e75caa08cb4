from __future__ import annotations

import os
import tempfile

# Must run before any storefront module reads its configuration.
_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'storefront.db')}"
os.environ["SECRET_KEY"] = "test-signing-key-0123456789abcdef0123456789"
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["LOG_TO_FILE"] = "0"

import pytest  # noqa: E402

TEST_SECRET = os.environ["SECRET_KEY"].encode()


@pytest.fixture()
def reset_database():
    from storefront.infrastructure.db import ENGINE, Base
    from storefront.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
