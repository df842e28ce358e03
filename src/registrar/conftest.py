# src/registrar/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["REGISTRAR_ENV"] = "test"

import psycopg
import pytest

from registrar import db
from registrar.config import config
from registrar.student import Student, StudentService, StudentStore
from registrar.student.memory import InMemoryStudentRepository

# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store() -> StudentStore:
    """Provide an empty in-memory store."""
    return StudentStore(InMemoryStudentRepository())


@pytest.fixture
def two_student_store(store) -> StudentStore:
    """
    Store holding two students:
        1: Aarav, 20, CS
        2: Priya, 21, EE
    """
    store.add(Student(name="Aarav", email="aarav@example.com", age=20, course="CS"))
    store.add(Student(name="Priya", email="priya@example.com", age=21, course="EE"))
    return store


@pytest.fixture
def seeded_store(store) -> StudentStore:
    """Store holding the five sample students."""
    from registrar.student.seed import seed_store

    seed_store(store)
    return store


@pytest.fixture
def service(seeded_store) -> StudentService:
    """Provide a StudentService over the sample students."""
    return StudentService(seeded_store)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def db_connection():
    """
    Provide a PostgreSQL connection with an empty students table.

    The connection runs in autocommit mode so a rejected statement does
    not poison later queries in the same test. Skipped when no
    DATABASE_URL is configured.
    """
    if not config.database_url:
        pytest.skip("DATABASE_URL not configured")

    conn = psycopg.connect(config.database_url, autocommit=True)
    db.set_connection_override(conn)

    from registrar.student.postgres import PostgresStudentRepository

    PostgresStudentRepository().create_table()
    with conn.cursor() as cur:
        cur.execute("TRUNCATE students RESTART IDENTITY")

    yield conn

    db.clear_connection_override()
    conn.close()


@pytest.fixture
def pg_repository(db_connection):
    """Provide a PostgresStudentRepository bound to the test connection."""
    from registrar.student.postgres import PostgresStudentRepository

    return PostgresStudentRepository()


# =============================================================================
# Flask App Fixtures
# =============================================================================


@pytest.fixture
def app(service):
    """Create Flask application for testing."""
    from registrar.app import create_app

    app = create_app(service)
    app.config["TESTING"] = True

    return app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()
