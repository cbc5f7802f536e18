"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from diff_review.llm.models import ReviewRequest

SAMPLE_DIFF = """\
diff --git a/utils/db.py b/utils/db.py
index 1234567..abcdefg 100644
--- a/utils/db.py
+++ b/utils/db.py
@@ -1,4 +1,8 @@
 import sqlite3
+
+def get_user(conn, username):
+    query = f"SELECT * FROM users WHERE name = '{username}'"
+    return conn.execute(query).fetchone()
"""


@pytest.fixture
def sample_diff():
    return SAMPLE_DIFF


@pytest.fixture
def make_request():
    """Build a ReviewRequest with overridable fields."""

    def _make(**overrides):
        fields = {
            "diff_text": "+x",
            "instructions": "review this",
            "provider": "gemini",
            "api_key": "k1",
            "use_strong_model": False,
        }
        fields.update(overrides)
        return ReviewRequest(**fields)

    return _make


@pytest.fixture
def fake_handle():
    """A model handle whose generate() returns "LGTM"."""
    handle = MagicMock()
    handle.provider_name = "gemini"
    handle.model = "gemini-2.5-flash"
    handle.generate = AsyncMock(return_value="LGTM")
    return handle
