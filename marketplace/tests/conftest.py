from __future__ import annotations

import os
import tempfile

# Configuration is read once per process, so the test environment has to be in
# place before any marketplace module is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="marketplace-tests-")
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'marketplace.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef0123456789"
os.environ["ENABLE_RATE_LIMIT"] = "false"
