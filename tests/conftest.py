import os
import sqlite3
import tempfile

import pytest
import pytest_asyncio

# Settings are read at import time, so point them at a scratch database first
_TMP_DIR = tempfile.mkdtemp(prefix="hallbooking-tests-")
TEST_DB_PATH = os.path.join(_TMP_DIR, "test.db")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["STATIC_DIR"] = os.path.join(_TMP_DIR, "frontend")
os.environ["LOG_JSON"] = "false"
os.environ.pop("LOG_FILE", None)

from fastapi.testclient import TestClient  # noqa: E402

from hallbooking.core.database import AsyncSessionLocal, init_db  # noqa: E402
from hallbooking.main import app  # noqa: E402


def _clear_tables():
    if not os.path.exists(TEST_DB_PATH):
        return
    conn = sqlite3.connect(TEST_DB_PATH)
    try:
        tables = [row[0] for row in conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
        )]
        for table in tables:
            conn.execute(f'DELETE FROM "{table}"')
        conn.commit()
    finally:
        conn.close()


@pytest.fixture(autouse=True)
def clean_database():
    """Every test starts and ends with empty tables"""
    _clear_tables()
    yield
    _clear_tables()


@pytest.fixture
def client():
    """HTTP client with its own cookie jar, lifespan included"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def other_client():
    """A second, independent browser"""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session():
    await init_db()
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def booking_payload():
    return {
        "fullName": "Alice Example",
        "aadharNumber": "1234 5678 9012",
        "phoneNumber": "+91 98765 43210",
        "gender": "female",
        "address": "1 Lake View, Pune",
        "age": 31,
        "email": "a@x.com",
        "eventDate": "2026-12-20",
        "event": "Wedding",
        "hall": "HALL-A",
        "BID": "BID-001",
    }
