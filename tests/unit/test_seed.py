"""Unit tests for easystock.storage.seed against in-memory stores."""

from __future__ import annotations

import sqlite3

import pytest
from structlog.testing import capture_logs

from easystock.storage import repository
from easystock.storage.db import ensure_schema
from easystock.storage.fixtures import (
    ADVANCED_TERMS,
    BASELINE_FAQS,
    BASELINE_STOCKS,
    BASELINE_TERMS,
    CATEGORY_ADVANCED,
    DOMESTIC_STOCKS,
    LEGACY_CATEGORY,
    OVERSEAS_STOCKS,
    REGION_DOMESTIC,
    REGION_OVERSEAS,
)
from easystock.storage.seed import (
    STEPS,
    _INSERT_STOCK,
    _insert_batch,
    _stock_params,
    add_region_column,
    reconcile_seed_data,
    seed_stocks,
    seed_terms,
)
from tests.conftest import LEGACY_STOCK_CODES, table_snapshot


def _count(conn: sqlite3.Connection, sql: str, params: tuple = ()) -> int:
    return conn.execute(sql, params).fetchone()[0]


class TestFixtures:
    def test_baseline_sizes(self) -> None:
        assert len(BASELINE_TERMS) == 21
        assert len(ADVANCED_TERMS) == 10
        assert len(OVERSEAS_STOCKS) == 20
        assert len(DOMESTIC_STOCKS) == 15
        assert len(BASELINE_FAQS) == 3

    def test_keys_are_unique(self) -> None:
        assert len({t.term for t in BASELINE_TERMS}) == len(BASELINE_TERMS)
        assert len({s.code for s in BASELINE_STOCKS}) == len(BASELINE_STOCKS)

    def test_first_term_is_advanced(self) -> None:
        assert BASELINE_TERMS[0].category == CATEGORY_ADVANCED

    def test_region_tags(self) -> None:
        assert {s.region for s in OVERSEAS_STOCKS} == {REGION_OVERSEAS}
        assert {s.region for s in DOMESTIC_STOCKS} == {REGION_DOMESTIC}


class TestEmptyStore:
    def test_full_seed_counts(self, seeded_db: sqlite3.Connection) -> None:
        assert _count(seeded_db, "SELECT COUNT(*) FROM terms") == 21
        assert _count(seeded_db, "SELECT COUNT(*) FROM stocks") == 35
        assert _count(seeded_db, "SELECT COUNT(*) FROM faqs") == 3

    def test_all_steps_ok(self, mem_db: sqlite3.Connection) -> None:
        results = reconcile_seed_data(mem_db)
        assert [r.step for r in results] == [s.__name__ for s in STEPS]
        assert all(r.ok for r in results)
        by_step = {r.step: r.changed for r in results}
        assert by_step["seed_terms"] == 21
        assert by_step["seed_stocks"] == 35
        assert by_step["seed_faqs"] == 3
        # Fresh schema already has the column.
        assert by_step["add_region_column"] == 0

    def test_user_tables_untouched(self, seeded_db: sqlite3.Connection) -> None:
        assert _count(seeded_db, "SELECT COUNT(*) FROM feedback") == 0
        assert _count(seeded_db, "SELECT COUNT(*) FROM favorite_stocks") == 0


class TestIdempotence:
    def test_second_run_changes_nothing(self, mem_db: sqlite3.Connection) -> None:
        reconcile_seed_data(mem_db)
        once = table_snapshot(mem_db)
        results = reconcile_seed_data(mem_db)
        assert table_snapshot(mem_db) == once
        assert all(r.ok and r.changed == 0 for r in results)

    def test_schema_and_seed_twice(self, mem_db: sqlite3.Connection) -> None:
        reconcile_seed_data(mem_db)
        once = table_snapshot(mem_db)
        ensure_schema(mem_db)
        reconcile_seed_data(mem_db)
        assert table_snapshot(mem_db) == once

    def test_user_rows_survive(self, seeded_db: sqlite3.Connection) -> None:
        repository.add_favorite(seeded_db, "AAPL", "Apple Inc.")
        repository.add_feedback(seeded_db, "bug", "T", "C")
        reconcile_seed_data(seeded_db)
        assert _count(seeded_db, "SELECT COUNT(*) FROM favorite_stocks") == 1
        assert _count(seeded_db, "SELECT COUNT(*) FROM feedback") == 1


class TestCategoryRelabel:
    def test_legacy_label_rewritten(self, seeded_db: sqlite3.Connection) -> None:
        seeded_db.execute(
            "INSERT INTO terms (term, category, simple_explanation) VALUES ('Old', ?, 'x')",
            (LEGACY_CATEGORY,),
        )
        seeded_db.commit()
        results = reconcile_seed_data(seeded_db)
        assert results[0].changed == 1
        assert _count(seeded_db, "SELECT COUNT(*) FROM terms WHERE category = ?", (LEGACY_CATEGORY,)) == 0
        row = seeded_db.execute("SELECT category FROM terms WHERE term = 'Old'").fetchone()
        assert row["category"] == CATEGORY_ADVANCED


class TestRegionColumn:
    def test_added_to_legacy_table(self, legacy_db: sqlite3.Connection) -> None:
        ensure_schema(legacy_db)
        result = add_region_column(legacy_db)
        assert result.ok and result.changed == 1
        cols = [r["name"] for r in legacy_db.execute("PRAGMA table_info(stocks)")]
        assert "region" in cols

    def test_duplicate_column_is_benign(self, mem_db: sqlite3.Connection) -> None:
        with capture_logs() as logs:
            result = add_region_column(mem_db)
        assert result.ok and result.changed == 0
        assert not [e for e in logs if e["log_level"] == "error"]

    def test_genuine_error_is_logged_and_later_steps_run(self, mem_db: sqlite3.Connection) -> None:
        mem_db.execute("DROP TABLE stocks")
        mem_db.commit()
        with capture_logs() as logs:
            results = reconcile_seed_data(mem_db)
        by_step = {r.step: r for r in results}
        assert not by_step["add_region_column"].ok
        assert "no such table" in (by_step["add_region_column"].error or "")
        assert not by_step["seed_stocks"].ok
        # Steps after the failures still ran.
        assert by_step["seed_terms"].ok and by_step["seed_terms"].changed == 21
        assert by_step["seed_faqs"].ok and by_step["seed_faqs"].changed == 3
        failed = [e["step"] for e in logs if e["event"] == "seed_step_failed"]
        assert "add_region_column" in failed


class TestRegionBackfill:
    def test_null_and_empty_become_overseas(self, seeded_db: sqlite3.Connection) -> None:
        seeded_db.execute("INSERT INTO stocks (code, name, region) VALUES ('N1', 'Null Co', NULL)")
        seeded_db.execute("INSERT INTO stocks (code, name, region) VALUES ('E1', 'Empty Co', '')")
        seeded_db.commit()
        results = reconcile_seed_data(seeded_db)
        assert {r.step: r.changed for r in results}["backfill_regions"] == 2
        missing = _count(seeded_db, "SELECT COUNT(*) FROM stocks WHERE region IS NULL OR region = ''")
        assert missing == 0
        row = seeded_db.execute("SELECT region FROM stocks WHERE code = 'N1'").fetchone()
        assert row["region"] == REGION_OVERSEAS


class TestSelfHealing:
    def test_legacy_install_converges(self, legacy_db: sqlite3.Connection) -> None:
        ensure_schema(legacy_db)
        results = reconcile_seed_data(legacy_db)
        assert all(r.ok for r in results)

        # Only the missing advanced terms are added; the first term is kept once.
        assert _count(legacy_db, "SELECT COUNT(*) FROM terms") == len(ADVANCED_TERMS)
        first = BASELINE_TERMS[0].term
        assert _count(legacy_db, "SELECT COUNT(*) FROM terms WHERE term = ?", (first,)) == 1
        assert _count(legacy_db, "SELECT COUNT(*) FROM terms WHERE category = ?", (LEGACY_CATEGORY,)) == 0

        # Existing overseas rows plus the whole domestic set.
        assert _count(legacy_db, "SELECT COUNT(*) FROM stocks") == len(LEGACY_STOCK_CODES) + len(DOMESTIC_STOCKS)
        assert _count(legacy_db, "SELECT COUNT(*) FROM stocks WHERE region = ?", (REGION_DOMESTIC,)) == len(DOMESTIC_STOCKS)
        assert _count(legacy_db, "SELECT COUNT(*) FROM stocks WHERE region IS NULL OR region = ''") == 0

    def test_legacy_install_then_rerun_is_stable(self, legacy_db: sqlite3.Connection) -> None:
        ensure_schema(legacy_db)
        reconcile_seed_data(legacy_db)
        once = table_snapshot(legacy_db)
        ensure_schema(legacy_db)
        reconcile_seed_data(legacy_db)
        assert table_snapshot(legacy_db) == once

    def test_advanced_top_up_skipped_when_two_or_more(self, mem_db: sqlite3.Connection) -> None:
        mem_db.executemany(
            "INSERT INTO terms (term, category, simple_explanation) VALUES (?, ?, 'x')",
            [("PER", CATEGORY_ADVANCED), ("PBR", CATEGORY_ADVANCED)],
        )
        mem_db.commit()
        result = seed_terms(mem_db)
        assert result.changed == 0
        assert _count(mem_db, "SELECT COUNT(*) FROM terms") == 2

    def test_advanced_top_up_when_none(self, mem_db: sqlite3.Connection) -> None:
        mem_db.execute("INSERT INTO terms (term, category, simple_explanation) VALUES ('Dividend', 'basic', 'x')")
        mem_db.commit()
        result = seed_terms(mem_db)
        assert result.changed == len(ADVANCED_TERMS)

    def test_domestic_backfill_skipped_when_present(self, mem_db: sqlite3.Connection) -> None:
        mem_db.execute("INSERT INTO stocks (code, name, region) VALUES ('005930', 'Samsung Electronics', 'domestic')")
        mem_db.commit()
        assert seed_stocks(mem_db).changed == 0

    def test_domestic_backfill_ignores_existing_codes(self, mem_db: sqlite3.Connection) -> None:
        # A domestic code stored under the overseas tag blocks only that row.
        mem_db.execute("INSERT INTO stocks (code, name, region) VALUES ('005930', 'Samsung Electronics', 'overseas')")
        mem_db.commit()
        result = seed_stocks(mem_db)
        assert result.ok
        assert result.changed == len(DOMESTIC_STOCKS) - 1
        assert _count(mem_db, "SELECT COUNT(*) FROM stocks WHERE code = '005930'") == 1


class TestInsertBatch:
    def test_failing_row_rolls_back_batch(self, mem_db: sqlite3.Connection) -> None:
        mem_db.execute("INSERT INTO stocks (code, name) VALUES ('COST', 'Costco')")
        mem_db.commit()
        with pytest.raises(sqlite3.IntegrityError):
            _insert_batch(mem_db, _INSERT_STOCK, _stock_params(OVERSEAS_STOCKS))
        assert _count(mem_db, "SELECT COUNT(*) FROM stocks") == 1

    def test_ignore_duplicates_keeps_count(self, seeded_db: sqlite3.Connection) -> None:
        written = _insert_batch(
            seeded_db, _INSERT_STOCK, _stock_params(BASELINE_STOCKS), ignore_duplicates=True
        )
        assert written == 0
        assert _count(seeded_db, "SELECT COUNT(*) FROM stocks") == 35

    def test_missing_region_defaults_to_overseas(self) -> None:
        from easystock.storage.fixtures import StockSeed

        params = _stock_params([StockSeed("X", "X Corp")])
        assert params[0]["region"] == REGION_OVERSEAS
