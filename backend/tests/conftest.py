"""Root conftest — shared test configuration."""

import os

# Settings are cached on first import of bloglist.main; pin test values first
os.environ.setdefault(
    "SECRET_KEY", "test-secret-key-with-enough-bytes-for-hs256-0123456789",
)
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
