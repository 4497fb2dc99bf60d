"""All SQL read/write accessors used by the catalog.  No raw SQL outside storage."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any

from easystock.storage.db import TABLES
from easystock.storage.fixtures import DEFAULT_REGION, StockSeed, TermSeed


class AlreadyExistsError(Exception):
    """A row with the same unique key is already stored."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} {key!r} already exists")
        self.entity = entity
        self.key = key


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


# ── Terms ─────────────────────────────────────────────────────────────────────

def list_terms(conn: sqlite3.Connection, category: str | None = None) -> list[dict[str, Any]]:
    """Return terms ordered by category then name, optionally for one category."""
    if category is None:
        rows = conn.execute("SELECT * FROM terms ORDER BY category, term").fetchall()
    else:
        rows = conn.execute(
            "SELECT * FROM terms WHERE category = ? ORDER BY term", (category,)
        ).fetchall()
    return [dict(r) for r in rows]


def get_term(conn: sqlite3.Connection, term_id: int) -> dict[str, Any] | None:
    row = conn.execute("SELECT * FROM terms WHERE id = ?", (term_id,)).fetchone()
    return dict(row) if row else None


def add_term(conn: sqlite3.Connection, term: TermSeed) -> int:
    """Insert a term and return its id.  Raises AlreadyExistsError on a duplicate name."""
    try:
        with conn:
            cursor = conn.execute(
                """
                INSERT INTO terms (term, category, simple_explanation, detailed_explanation, example)
                VALUES (?, ?, ?, ?, ?)
                """,
                (term.term, term.category, term.simple_explanation,
                 term.detailed_explanation, term.example),
            )
    except sqlite3.IntegrityError as exc:
        raise AlreadyExistsError("term", term.term) from exc
    return cursor.lastrowid  # type: ignore[return-value]


# ── Stocks ────────────────────────────────────────────────────────────────────

def list_stocks(conn: sqlite3.Connection, region: str | None = None) -> list[dict[str, Any]]:
    """Return stocks ordered by name, optionally for one region tag."""
    if region is None:
        rows = conn.execute("SELECT * FROM stocks ORDER BY name").fetchall()
    else:
        rows = conn.execute(
            "SELECT * FROM stocks WHERE region = ? ORDER BY name", (region,)
        ).fetchall()
    return [dict(r) for r in rows]


def get_stock(conn: sqlite3.Connection, code: str) -> dict[str, Any] | None:
    row = conn.execute("SELECT * FROM stocks WHERE code = ?", (code,)).fetchone()
    return dict(row) if row else None


def add_stock(conn: sqlite3.Connection, stock: StockSeed) -> int:
    """Insert a stock and return its id.  Raises AlreadyExistsError on a duplicate code."""
    try:
        with conn:
            cursor = conn.execute(
                """
                INSERT INTO stocks
                    (code, name, sector, description, recommendation_reason, risk_level, region)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (stock.code, stock.name, stock.sector, stock.description,
                 stock.recommendation_reason, stock.risk_level, stock.region or DEFAULT_REGION),
            )
    except sqlite3.IntegrityError as exc:
        raise AlreadyExistsError("stock", stock.code) from exc
    return cursor.lastrowid  # type: ignore[return-value]


# ── FAQs ──────────────────────────────────────────────────────────────────────

def list_faqs(conn: sqlite3.Connection, category: str | None = None) -> list[dict[str, Any]]:
    if category is None:
        rows = conn.execute("SELECT * FROM faqs ORDER BY id").fetchall()
    else:
        rows = conn.execute(
            "SELECT * FROM faqs WHERE category = ? ORDER BY id", (category,)
        ).fetchall()
    return [dict(r) for r in rows]


# ── Favorites ─────────────────────────────────────────────────────────────────

def list_favorites(conn: sqlite3.Connection) -> list[dict[str, Any]]:
    """Return favorites, most recently added first."""
    rows = conn.execute(
        "SELECT code, name, created_at FROM favorite_stocks ORDER BY created_at DESC, id DESC"
    ).fetchall()
    return [dict(r) for r in rows]


def add_favorite(conn: sqlite3.Connection, code: str, name: str) -> int:
    """Insert a favorite and return its id.

    Looks the code up first; a concurrent insert that slips past the lookup
    is caught by the unique constraint.  Both raise AlreadyExistsError.
    """
    existing = conn.execute(
        "SELECT 1 FROM favorite_stocks WHERE code = ?", (code,)
    ).fetchone()
    if existing is not None:
        raise AlreadyExistsError("favorite", code)
    try:
        with conn:
            cursor = conn.execute(
                "INSERT INTO favorite_stocks (code, name, created_at) VALUES (?, ?, ?)",
                (code, name, _utcnow()),
            )
    except sqlite3.IntegrityError as exc:
        raise AlreadyExistsError("favorite", code) from exc
    return cursor.lastrowid  # type: ignore[return-value]


# ── Feedback ──────────────────────────────────────────────────────────────────

def add_feedback(
    conn: sqlite3.Connection,
    type: str,
    title: str,
    content: str,
    email: str | None = None,
) -> int:
    """Append a feedback row and return its id.  An empty email is stored as NULL."""
    cursor = conn.execute(
        """
        INSERT INTO feedback (type, title, content, email, created_at)
        VALUES (?, ?, ?, ?, ?)
        """,
        (type, title, content, email or None, _utcnow()),
    )
    conn.commit()
    return cursor.lastrowid  # type: ignore[return-value]


# ── Stats ─────────────────────────────────────────────────────────────────────

def count_rows(conn: sqlite3.Connection, table: str) -> int:
    if table not in TABLES:
        raise ValueError(f"Unknown table: {table}")
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
