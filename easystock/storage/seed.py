"""Seed reconciliation: bring an existing store up to the current data shape.

Runs on every startup after :func:`easystock.storage.db.ensure_schema`.  The
steps run in a fixed order and each one is best-effort: a failing step is
logged and recorded in its :class:`StepResult`, and the remaining steps still
run.  There is no applied-migrations ledger.  Every step is written so that
re-running it against an already reconciled store changes nothing:

1. relabel terms filed under the deprecated category;
2. add ``stocks.region`` to tables created before the column existed;
3. backfill NULL/empty regions with the default sentinel;
4. seed terms (full set into an empty table, otherwise top up the
   advanced terms when at most one is present);
5. seed stocks (full set into an empty table, otherwise add the domestic
   set when no domestic row exists);
6. seed FAQs into an empty table.

User-entered tables (feedback, favorite_stocks) are never touched.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from easystock.storage.fixtures import (
    ADVANCED_TERMS,
    BASELINE_FAQS,
    BASELINE_STOCKS,
    BASELINE_TERMS,
    CATEGORY_ADVANCED,
    DEFAULT_REGION,
    DOMESTIC_STOCKS,
    LEGACY_CATEGORY,
    REGION_DOMESTIC,
    FaqSeed,
    StockSeed,
    TermSeed,
)
from easystock.utils.logging import get_logger

log = get_logger(__name__)

_INSERT_TERM = """
    INSERT {verb} INTO terms (term, category, simple_explanation, detailed_explanation, example)
    VALUES (:term, :category, :simple_explanation, :detailed_explanation, :example)
"""

_INSERT_STOCK = """
    INSERT {verb} INTO stocks
        (code, name, sector, description, recommendation_reason, risk_level, region)
    VALUES
        (:code, :name, :sector, :description, :recommendation_reason, :risk_level, :region)
"""

_INSERT_FAQ = """
    INSERT INTO faqs (question, answer, category)
    VALUES (:question, :answer, :category)
"""


@dataclass
class StepResult:
    """Outcome of one reconciliation step."""

    step: str
    ok: bool = True
    changed: int = 0
    error: str | None = None


# ── Helpers ───────────────────────────────────────────────────────────────────

def _count(conn: sqlite3.Connection, sql: str, params: Sequence = ()) -> int:
    return conn.execute(sql, params).fetchone()[0]


def _insert_batch(
    conn: sqlite3.Connection, sql: str, rows: Iterable[dict], ignore_duplicates: bool = False
) -> int:
    """Insert *rows* in a single transaction.  Returns the number of rows written.

    Any failing row rolls back the whole batch.  With *ignore_duplicates*
    rows that hit a unique constraint are skipped instead.
    """
    statement = sql.format(verb="OR IGNORE" if ignore_duplicates else "")
    before = conn.total_changes
    with conn:
        conn.executemany(statement, list(rows))
    return conn.total_changes - before


def _term_params(terms: Iterable[TermSeed]) -> list[dict]:
    return [
        {
            "term": t.term,
            "category": t.category,
            "simple_explanation": t.simple_explanation,
            "detailed_explanation": t.detailed_explanation,
            "example": t.example,
        }
        for t in terms
    ]


def _stock_params(stocks: Iterable[StockSeed]) -> list[dict]:
    return [
        {
            "code": s.code,
            "name": s.name,
            "sector": s.sector,
            "description": s.description,
            "recommendation_reason": s.recommendation_reason,
            "risk_level": s.risk_level,
            "region": s.region or DEFAULT_REGION,
        }
        for s in stocks
    ]


def _faq_params(faqs: Iterable[FaqSeed]) -> list[dict]:
    return [{"question": f.question, "answer": f.answer, "category": f.category} for f in faqs]


def _is_duplicate_column(exc: sqlite3.Error) -> bool:
    return "duplicate column" in str(exc).lower()


# ── Steps ─────────────────────────────────────────────────────────────────────

def relabel_legacy_categories(conn: sqlite3.Connection) -> StepResult:
    result = StepResult("relabel_legacy_categories")
    with conn:
        cursor = conn.execute(
            "UPDATE terms SET category = ? WHERE category = ?",
            (CATEGORY_ADVANCED, LEGACY_CATEGORY),
        )
    result.changed = cursor.rowcount
    if result.changed:
        log.info("terms_relabelled", old=LEGACY_CATEGORY, new=CATEGORY_ADVANCED, count=result.changed)
    return result


def add_region_column(conn: sqlite3.Connection) -> StepResult:
    """Add ``stocks.region`` if missing.

    SQLite has no ``ADD COLUMN IF NOT EXISTS``; the ALTER is attempted every
    run and the "duplicate column" error is the expected outcome once the
    column exists.  Any other error is a real failure.
    """
    result = StepResult("add_region_column")
    try:
        conn.execute(f"ALTER TABLE stocks ADD COLUMN region TEXT DEFAULT '{DEFAULT_REGION}'")
        conn.commit()
    except sqlite3.OperationalError as exc:
        if not _is_duplicate_column(exc):
            raise
        log.debug("region_column_exists")
        return result
    result.changed = 1
    log.info("region_column_added", default=DEFAULT_REGION)
    return result


def backfill_regions(conn: sqlite3.Connection) -> StepResult:
    result = StepResult("backfill_regions")
    with conn:
        cursor = conn.execute(
            "UPDATE stocks SET region = ? WHERE region IS NULL OR region = ''",
            (DEFAULT_REGION,),
        )
    result.changed = cursor.rowcount
    if result.changed:
        log.info("regions_backfilled", region=DEFAULT_REGION, count=result.changed)
    return result


def seed_terms(conn: sqlite3.Connection) -> StepResult:
    result = StepResult("seed_terms")
    if _count(conn, "SELECT COUNT(*) FROM terms") == 0:
        result.changed = _insert_batch(conn, _INSERT_TERM, _term_params(BASELINE_TERMS))
        log.info("terms_seeded", count=result.changed)
        return result

    # Older snapshots shipped at most the first advanced term.
    advanced = _count(conn, "SELECT COUNT(*) FROM terms WHERE category = ?", (CATEGORY_ADVANCED,))
    if advanced <= 1:
        result.changed = _insert_batch(
            conn, _INSERT_TERM, _term_params(ADVANCED_TERMS), ignore_duplicates=True
        )
        log.info("advanced_terms_backfilled", existing=advanced, count=result.changed)
    return result


def seed_stocks(conn: sqlite3.Connection) -> StepResult:
    result = StepResult("seed_stocks")
    if _count(conn, "SELECT COUNT(*) FROM stocks") == 0:
        result.changed = _insert_batch(conn, _INSERT_STOCK, _stock_params(BASELINE_STOCKS))
        log.info("stocks_seeded", count=result.changed)
        return result

    domestic = _count(conn, "SELECT COUNT(*) FROM stocks WHERE region = ?", (REGION_DOMESTIC,))
    if domestic == 0:
        result.changed = _insert_batch(
            conn, _INSERT_STOCK, _stock_params(DOMESTIC_STOCKS), ignore_duplicates=True
        )
        log.info("domestic_stocks_backfilled", count=result.changed)
    return result


def seed_faqs(conn: sqlite3.Connection) -> StepResult:
    result = StepResult("seed_faqs")
    if _count(conn, "SELECT COUNT(*) FROM faqs") == 0:
        result.changed = _insert_batch(conn, _INSERT_FAQ, _faq_params(BASELINE_FAQS))
        log.info("faqs_seeded", count=result.changed)
    return result


STEPS: tuple[Callable[[sqlite3.Connection], StepResult], ...] = (
    relabel_legacy_categories,
    add_region_column,
    backfill_regions,
    seed_terms,
    seed_stocks,
    seed_faqs,
)


def reconcile_seed_data(conn: sqlite3.Connection) -> list[StepResult]:
    """Run every reconciliation step in order.  Never raises ``sqlite3.Error``.

    Returns one :class:`StepResult` per step.  The schema must already exist.
    """
    results: list[StepResult] = []
    for step in STEPS:
        try:
            results.append(step(conn))
        except sqlite3.Error as exc:
            name = step.__name__
            log.error("seed_step_failed", step=name, error=str(exc))
            results.append(StepResult(name, ok=False, error=str(exc)))
    return results
