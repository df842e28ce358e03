"""
PostgreSQL access for the student backend.

Each helper opens a short-lived psycopg connection to DATABASE_URL,
runs one statement and commits. Rows come back as dicts keyed by
column name, ready for Student.from_row().

Tests pin every helper to one connection with set_connection_override().
"""

from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.rows import dict_row

from registrar.config import config

# =============================================================================
# Shared Test Connection
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """Route every helper through conn until clear_connection_override() is called."""
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    """Go back to opening a connection per call."""
    global _connection_override
    _connection_override = None


# =============================================================================
# Connections
# =============================================================================


@contextmanager
def get_connection():
    """
    Yield a connection to DATABASE_URL.

    A fresh connection is committed when the block finishes, rolled back
    if it raises, and always closed. The shared test connection is yielded
    as-is; its owner decides when to commit and close it.

    Raises:
        RuntimeError: DATABASE_URL is not configured
    """
    if _connection_override is not None:
        yield _connection_override
        return

    if not config.database_url:
        raise RuntimeError("DATABASE_URL is not set")

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor():
    """Yield a dict-row cursor on a connection from get_connection()."""
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur


# =============================================================================
# Statements
# =============================================================================


def execute(query: str, params: tuple = None) -> int:
    """Run an UPDATE, DELETE or TRUNCATE and return how many rows it touched."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def execute_script(script: str) -> None:
    """Run a schema file in one round trip."""
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(script)


def fetch_one(query: str, params: tuple = None) -> dict[str, Any] | None:
    """
    First row of a SELECT or RETURNING statement.

    Returns:
        The row as a dict, or None when the statement matched nothing
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchone()


def fetch_all(query: str, params: tuple = None) -> list[dict[str, Any]]:
    """Every row of a SELECT, as dicts. Empty list when nothing matched."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()
