"""Shared pytest fixtures for bindql unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from tests.fixtures import load_ddl


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database with the sample schema."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl("sqlite"))
    yield conn
    conn.close()


@pytest.fixture()
def fetch_people(db: sqlite3.Connection):
    """Return a helper reading ``people`` rows matching a name, oldest id first."""

    def _fetch(name: str) -> list[sqlite3.Row]:
        return db.execute(
            "SELECT * FROM people WHERE name = ? ORDER BY id", (name,)
        ).fetchall()

    return _fetch
