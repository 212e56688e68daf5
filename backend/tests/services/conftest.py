"""Service test fixtures — async in-memory DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.db_manager points at the test engine (lifespan is not run)
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from school_admin.db.base import Base
from school_admin.infrastructure.database import DatabaseSessionManager
from school_admin.main import app
import school_admin.models  # noqa: F401


# ─── Payload builders ───────────────────────────────────────────

def _student(**overrides) -> dict:
    payload = {
        "firstName": "Maya",
        "lastName": "Patel",
        "email": "maya.patel@school.edu",
        "studentId": "S-1001",
        "grade": "10",
        "dateOfBirth": "2009-04-12",
        "phoneNumber": "555-0101",
        "address": "12 Elm Street",
    }
    payload.update(overrides)
    return payload


def _teacher(**overrides) -> dict:
    payload = {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann.lee@school.edu",
        "teacherId": "T-01",
        "department": "Science",
        "subject": "Biology",
    }
    payload.update(overrides)
    return payload


def _course(**overrides) -> dict:
    payload = {
        "courseName": "Biology I",
        "courseCode": "BIO-101",
        "description": "Cells, genetics and ecosystems",
        "credits": 3,
        "duration": "1 semester",
        "maxStudents": 30,
        "schedule": "Mon/Wed 09:00",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def student_payload():
    """Valid camelCase student body; keyword overrides replace fields."""
    return _student


@pytest.fixture
def teacher_payload():
    return _teacher


@pytest.fixture
def course_payload():
    return _course


# ─── Database and client ────────────────────────────────────────


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client wired to the test database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.db_manager


@pytest.fixture
def make_student(client):
    async def _make(**overrides) -> dict:
        res = await client.post("/api/students", json=_student(**overrides))
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make


@pytest.fixture
def make_teacher(client):
    async def _make(**overrides) -> dict:
        res = await client.post("/api/teachers", json=_teacher(**overrides))
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make


@pytest.fixture
def make_course(client):
    async def _make(**overrides) -> dict:
        res = await client.post("/api/courses", json=_course(**overrides))
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make
