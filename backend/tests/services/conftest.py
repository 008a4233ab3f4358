"""Service test fixtures — in-memory stores, async SQLite DB, FastAPI test client.

Invariants:
    - Every test gets fresh in-memory stores and a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - Registry tests run against tests/fakes.py: fast, and failure injection is trivial
    - SQL store and route tests use SQLite in-memory with StaticPool: one shared
      connection, so every session sees the same tables
"""

import logging

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import classroom.infrastructure.database as db_module
from classroom.db.session import create_schema
from classroom.infrastructure.database import get_db, DatabaseSessionManager
from classroom.infrastructure.sql_stores import SqlStudentStore, SqlTeacherStore
from classroom.main import app
from classroom.services.student_registry import StudentRegistry
from classroom.services.teacher_registry import TeacherRegistry
from tests.fakes import InMemoryStudentStore, InMemoryTeacherStore


@pytest.fixture
def student_store():
    return InMemoryStudentStore()


@pytest.fixture
def teacher_store(student_store):
    return InMemoryTeacherStore(student_store)


@pytest.fixture
def student_registry(student_store):
    return StudentRegistry(student_store, logging.getLogger("tests.students"))


@pytest.fixture
def teacher_registry(teacher_store, student_registry):
    return TeacherRegistry(
        teacher_store, student_registry, logging.getLogger("tests.teachers"),
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def sql_teacher_registry(test_db):
    students = StudentRegistry(SqlStudentStore(test_db))
    return TeacherRegistry(SqlTeacherStore(test_db), students)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
