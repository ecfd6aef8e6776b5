"""Root conftest - shared test configuration."""

import os

# Keep tests away from the development database file
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
