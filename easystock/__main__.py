"""CLI entry point: python -m easystock <command>

Commands:
  migrate    Create missing tables and reconcile reference data.
  status     Print row counts per table.
  terms      List terms (optionally --category).
  term       Show one term by id.
  stocks     List stocks (optionally --region).
  stock      Show one stock by code.
  faqs       List FAQs.
  favorites  List favorite stocks, newest first.
  favorite   Add a stock to favorites.
  feedback   Submit feedback.
"""

from __future__ import annotations

import argparse
import sqlite3
import sys

from easystock import catalog
from easystock.cli_output import (
    print_faqs,
    print_favorites,
    print_seed_report,
    print_status,
    print_stock,
    print_stocks,
    print_term,
    print_terms,
)
from easystock.config import Config, get_config
from easystock.storage import repository
from easystock.storage.db import TABLES, close_db, get_db
from easystock.utils.logging import configure_logging


def _cmd_migrate(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    # get_db() has already created the tables.
    if args.schema_only:
        print(f"Schema ready at {config.db_path}")
        return 0
    results = catalog.prepare_store(conn)
    print_seed_report(results)
    print(f"Database ready at {config.db_path}")
    return 0


def _cmd_status(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    counts = {table: repository.count_rows(conn, table) for table in TABLES}
    print_status(counts, config.db_path)
    return 0


def _cmd_terms(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    print_terms(catalog.fetch_terms(conn, args.category))
    return 0


def _cmd_term(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    term = catalog.fetch_term(conn, args.id)
    if term is None:
        print("Term not found.", file=sys.stderr)
        return 1
    print_term(term)
    return 0


def _cmd_stocks(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    print_stocks(catalog.fetch_stocks(conn, args.region))
    return 0


def _cmd_stock(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    stock = catalog.fetch_stock(conn, args.code)
    if stock is None:
        print("Stock not found.", file=sys.stderr)
        return 1
    print_stock(stock)
    return 0


def _cmd_faqs(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    print_faqs(catalog.fetch_faqs(conn))
    return 0


def _cmd_favorites(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    print_favorites(catalog.fetch_favorites(conn))
    return 0


def _cmd_favorite(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    outcome = catalog.favorite_stock(conn, args.code, args.name)
    if outcome is catalog.FavoriteOutcome.ALREADY_EXISTS:
        print(f"{args.code} is already in favorites.", file=sys.stderr)
        return 1
    print(f"Added {args.code} to favorites.")
    return 0


def _cmd_feedback(conn: sqlite3.Connection, args: argparse.Namespace, config: Config) -> int:
    feedback_id = catalog.submit_feedback(conn, args.type, args.title, args.content, args.email)
    print(f"Feedback #{feedback_id} received. Thank you!")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easystock",
        description="Beginner-friendly stock terms and listings",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_migrate = sub.add_parser("migrate", help="Create tables and reconcile reference data")
    p_migrate.add_argument(
        "--schema-only", action="store_true", help="Only create missing tables"
    )

    sub.add_parser("status", help="Show row counts per table")

    p_terms = sub.add_parser("terms", help="List terms")
    p_terms.add_argument("--category", default=None)

    p_term = sub.add_parser("term", help="Show one term")
    p_term.add_argument("id", type=int)

    p_stocks = sub.add_parser("stocks", help="List stocks")
    p_stocks.add_argument("--region", default=None)

    p_stock = sub.add_parser("stock", help="Show one stock")
    p_stock.add_argument("code")

    sub.add_parser("faqs", help="List FAQs")
    sub.add_parser("favorites", help="List favorite stocks")

    p_fav = sub.add_parser("favorite", help="Add a stock to favorites")
    p_fav.add_argument("code")
    p_fav.add_argument("name")

    p_fb = sub.add_parser("feedback", help="Submit feedback")
    p_fb.add_argument("--type", required=True)
    p_fb.add_argument("--title", required=True)
    p_fb.add_argument("--content", required=True)
    p_fb.add_argument("--email", default=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = get_config()
    configure_logging(config.log_level, config.log_format)

    dispatch = {
        "migrate": _cmd_migrate,
        "status": _cmd_status,
        "terms": _cmd_terms,
        "term": _cmd_term,
        "stocks": _cmd_stocks,
        "stock": _cmd_stock,
        "faqs": _cmd_faqs,
        "favorites": _cmd_favorites,
        "favorite": _cmd_favorite,
        "feedback": _cmd_feedback,
    }

    conn = get_db(config.db_path)
    try:
        return dispatch[args.command](conn, args, config)
    except catalog.ValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    finally:
        close_db()


if __name__ == "__main__":
    sys.exit(main())
