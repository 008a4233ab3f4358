"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real PostgreSQL server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")
