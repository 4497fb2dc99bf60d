"""Catalog facade: the entry points request handlers call.

Every entry point prepares the store first (schema, then seed
reconciliation); both are cheap no-ops once the store is current.  Listing
calls degrade to an empty list on storage errors so callers always have
something to render; single-row lookups and writes let storage errors
propagate.
"""

from __future__ import annotations

import enum
import sqlite3
from typing import Any

from easystock.storage import repository
from easystock.storage.db import ensure_schema
from easystock.storage.seed import StepResult, reconcile_seed_data
from easystock.utils.logging import get_logger

log = get_logger(__name__)


class ValidationError(ValueError):
    """A required field is missing or empty."""


class FavoriteOutcome(enum.Enum):
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


def prepare_store(conn: sqlite3.Connection) -> list[StepResult]:
    """Ensure the schema, then reconcile seed data.  Schema errors propagate."""
    ensure_schema(conn)
    return reconcile_seed_data(conn)


def _require(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


# ── Reference data ────────────────────────────────────────────────────────────

def fetch_terms(conn: sqlite3.Connection, category: str | None = None) -> list[dict[str, Any]]:
    try:
        prepare_store(conn)
        return repository.list_terms(conn, category)
    except sqlite3.Error as exc:
        log.error("fetch_terms_failed", error=str(exc))
        return []


def fetch_term(conn: sqlite3.Connection, term_id: int) -> dict[str, Any] | None:
    prepare_store(conn)
    return repository.get_term(conn, term_id)


def fetch_stocks(conn: sqlite3.Connection, region: str | None = None) -> list[dict[str, Any]]:
    try:
        prepare_store(conn)
        return repository.list_stocks(conn, region)
    except sqlite3.Error as exc:
        log.error("fetch_stocks_failed", error=str(exc))
        return []


def fetch_stock(conn: sqlite3.Connection, code: str) -> dict[str, Any] | None:
    prepare_store(conn)
    return repository.get_stock(conn, code)


def fetch_faqs(conn: sqlite3.Connection, category: str | None = None) -> list[dict[str, Any]]:
    try:
        prepare_store(conn)
        return repository.list_faqs(conn, category)
    except sqlite3.Error as exc:
        log.error("fetch_faqs_failed", error=str(exc))
        return []


# ── User actions ──────────────────────────────────────────────────────────────

def fetch_favorites(conn: sqlite3.Connection) -> list[dict[str, Any]]:
    prepare_store(conn)
    return repository.list_favorites(conn)


def favorite_stock(conn: sqlite3.Connection, code: str, name: str) -> FavoriteOutcome:
    _require(code=code, name=name)
    prepare_store(conn)
    try:
        repository.add_favorite(conn, code, name)
    except repository.AlreadyExistsError:
        log.info("favorite_exists", code=code)
        return FavoriteOutcome.ALREADY_EXISTS
    log.info("favorite_added", code=code)
    return FavoriteOutcome.ADDED


def submit_feedback(
    conn: sqlite3.Connection,
    type: str,
    title: str,
    content: str,
    email: str | None = None,
) -> int:
    _require(type=type, title=title, content=content)
    prepare_store(conn)
    feedback_id = repository.add_feedback(conn, type, title, content, email)
    log.info("feedback_submitted", feedback_id=feedback_id, type=type)
    return feedback_id
