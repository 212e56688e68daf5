"""Root conftest — shared test configuration."""

import os

# Importing school_admin.main reads settings; never point tests at a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
