"""Pretty-print catalog data to stdout."""

from __future__ import annotations

from typing import Any, Sequence

from easystock.storage.seed import StepResult

_SEP = "=" * 60


def _dash(v: Any) -> str:
    return str(v) if v not in (None, "") else "-"


def print_seed_report(results: Sequence[StepResult]) -> None:
    print(_SEP)
    print("  Seed reconciliation")
    print(_SEP)
    for r in results:
        status = "ok" if r.ok else "FAILED"
        line = f"  {r.step:<28} {status:<7} changed={r.changed}"
        if r.error:
            line += f"  ({r.error})"
        print(line)
    print(_SEP)


def print_status(counts: dict[str, int], db_path: str) -> None:
    print(f"Database         : {db_path}")
    for table, count in counts.items():
        print(f"  {table:<15}: {count}")


def print_terms(terms: Sequence[dict[str, Any]]) -> None:
    if not terms:
        print("No terms.")
        return
    current = None
    for t in terms:
        if t["category"] != current:
            current = t["category"]
            print(f"\n  [{current}]")
        print(f"    {t['id']:>4}  {t['term']:<24} {t['simple_explanation']}")


def print_term(term: dict[str, Any]) -> None:
    print(_SEP)
    print(f"  {term['term']}  ({term['category']})")
    print(_SEP)
    print(f"  {term['simple_explanation']}")
    if term.get("detailed_explanation"):
        print(f"\n  {term['detailed_explanation']}")
    if term.get("example"):
        print(f"\n  Example: {term['example']}")


def print_stocks(stocks: Sequence[dict[str, Any]]) -> None:
    if not stocks:
        print("No stocks.")
        return
    for s in stocks:
        print(
            f"  {s['code']:<8}  {s['name']:<30} {_dash(s.get('sector')):<28}"
            f" {_dash(s.get('risk_level')):<7} {_dash(s.get('region'))}"
        )


def print_stock(stock: dict[str, Any]) -> None:
    print(_SEP)
    print(f"  {stock['name']} ({stock['code']})")
    print(_SEP)
    print(f"  Sector : {_dash(stock.get('sector'))}")
    print(f"  Region : {_dash(stock.get('region'))}")
    print(f"  Risk   : {_dash(stock.get('risk_level'))}")
    if stock.get("description"):
        print(f"\n  {stock['description']}")
    if stock.get("recommendation_reason"):
        print(f"\n  Why: {stock['recommendation_reason']}")


def print_faqs(faqs: Sequence[dict[str, Any]]) -> None:
    if not faqs:
        print("No FAQs.")
        return
    for f in faqs:
        print(f"  Q: {f['question']}")
        print(f"  A: {f['answer']}")
        print()


def print_favorites(favorites: Sequence[dict[str, Any]]) -> None:
    if not favorites:
        print("No favorites yet.")
        return
    for f in favorites:
        print(f"  {f['code']:<8}  {f['name']:<30} {f['created_at']}")
