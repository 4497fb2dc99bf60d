"""SQLite connection management, WAL mode, and schema creation."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from easystock.utils.logging import get_logger

log = get_logger(__name__)

# Columns added after the first release (stocks.region) are handled by the
# seed reconciler; CREATE TABLE IF NOT EXISTS never alters an existing table.
_DDL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS terms (
    id                   INTEGER PRIMARY KEY AUTOINCREMENT,
    term                 TEXT    NOT NULL UNIQUE,
    category             TEXT    NOT NULL,
    simple_explanation   TEXT    NOT NULL,
    detailed_explanation TEXT,
    example              TEXT,
    created_at           DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS stocks (
    id                    INTEGER PRIMARY KEY AUTOINCREMENT,
    code                  TEXT    NOT NULL UNIQUE,
    name                  TEXT    NOT NULL,
    sector                TEXT,
    description           TEXT,
    recommendation_reason TEXT,
    risk_level            TEXT,
    region                TEXT    DEFAULT 'overseas',
    created_at            DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS faqs (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    question    TEXT    NOT NULL,
    answer      TEXT    NOT NULL,
    category    TEXT,
    created_at  DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS feedback (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    type        TEXT    NOT NULL,
    title       TEXT    NOT NULL,
    content     TEXT    NOT NULL,
    email       TEXT,
    created_at  DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS favorite_stocks (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    code        TEXT    NOT NULL UNIQUE,
    name        TEXT    NOT NULL,
    created_at  DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

TABLES = ("terms", "stocks", "faqs", "feedback", "favorite_stocks")


def get_connection(db_path: str | Path = ":memory:") -> sqlite3.Connection:
    """Return a sqlite3 connection with dict-like rows.

    Using ``check_same_thread=False`` is safe here because the store has a
    single writer: every statement goes through the repository and
    reconciler, called synchronously by the serving process.
    """
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create any missing tables (idempotent, uses CREATE IF NOT EXISTS).

    Errors propagate: a store whose tables cannot be created is unusable.
    """
    conn.executescript(_DDL)
    conn.commit()


def init_db(db_path: str | Path = ":memory:") -> sqlite3.Connection:
    """Open (or create) the database and ensure the schema.  Returns the connection."""
    path = Path(db_path)
    if str(db_path) != ":memory:":
        path.parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    try:
        ensure_schema(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


# ── Process-wide handle ───────────────────────────────────────────────────────

_conn: sqlite3.Connection | None = None


def get_db(db_path: str | Path = ":memory:") -> sqlite3.Connection:
    """Return the process-wide connection, opening it on first call.

    *db_path* is only consulted when the connection is opened.
    """
    global _conn
    if _conn is None:
        _conn = init_db(db_path)
        log.info("db_opened", db_path=str(db_path))
    return _conn


def close_db() -> None:
    """Close the process-wide connection, if open."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
