# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from tempfile import mkdtemp

# Settings and the engine are built at import time, so the environment
# must be in place before anything from blogapp is imported.
_DB_PATH = Path(mkdtemp(prefix="blogapp-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["ENVIRONMENT"] = "testing"
os.environ["ENABLE_TESTING_ROUTES"] = "true"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from pytest import fixture  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from blogapp.db.database import engine  # noqa: E402
from blogapp.managers.metrics import metrics_manager  # noqa: E402
from blogapp.models import BlogDB, PostDB, UserDB  # noqa: E402, F401


@fixture
async def db() -> AsyncGenerator[None]:
    """Create a fresh schema for one test and drop it afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@fixture(autouse=True)
def reset_metrics() -> Generator[None]:
    """Isolate the process-wide metrics counters between tests."""
    metrics_manager.reset_metrics()
    yield
    metrics_manager.reset_metrics()
