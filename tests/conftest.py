"""Shared pytest fixtures."""

from __future__ import annotations

import sqlite3
from typing import Generator

import pytest

from easystock.storage.db import get_connection, init_db
from easystock.storage.fixtures import BASELINE_TERMS, LEGACY_CATEGORY
from easystock.storage.seed import reconcile_seed_data

# Shape of the store before stocks.region existed.
_LEGACY_DDL = """
CREATE TABLE terms (
    id                   INTEGER PRIMARY KEY AUTOINCREMENT,
    term                 TEXT    NOT NULL UNIQUE,
    category             TEXT    NOT NULL,
    simple_explanation   TEXT    NOT NULL,
    detailed_explanation TEXT,
    example              TEXT,
    created_at           DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE stocks (
    id                    INTEGER PRIMARY KEY AUTOINCREMENT,
    code                  TEXT    NOT NULL UNIQUE,
    name                  TEXT    NOT NULL,
    sector                TEXT,
    description           TEXT,
    recommendation_reason TEXT,
    risk_level            TEXT,
    created_at            DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

LEGACY_STOCK_CODES = ("AAPL", "MSFT", "GOOGL")


def table_snapshot(conn: sqlite3.Connection) -> dict[str, list[tuple]]:
    """Every row of every table, in id order."""
    tables = [
        r[0]
        for r in conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
    ]
    return {
        t: [tuple(r) for r in conn.execute(f"SELECT * FROM {t} ORDER BY id")] for t in tables
    }


@pytest.fixture()
def mem_db() -> Generator[sqlite3.Connection, None, None]:
    """In-memory SQLite DB with schema applied."""
    conn = init_db(":memory:")
    yield conn
    conn.close()


@pytest.fixture()
def seeded_db(mem_db: sqlite3.Connection) -> sqlite3.Connection:
    """In-memory DB with schema and reference data."""
    reconcile_seed_data(mem_db)
    return mem_db


@pytest.fixture()
def legacy_db() -> Generator[sqlite3.Connection, None, None]:
    """An early install: only the first term, filed under the old category,
    and a few overseas stocks in a table without a region column."""
    conn = get_connection(":memory:")
    conn.executescript(_LEGACY_DDL)
    first = BASELINE_TERMS[0]
    conn.execute(
        "INSERT INTO terms (term, category, simple_explanation) VALUES (?, ?, ?)",
        (first.term, LEGACY_CATEGORY, first.simple_explanation),
    )
    conn.executemany(
        "INSERT INTO stocks (code, name) VALUES (?, ?)",
        [(code, f"{code} Inc.") for code in LEGACY_STOCK_CODES],
    )
    conn.commit()
    yield conn
    conn.close()
