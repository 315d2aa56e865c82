#!/usr/bin/env python3
"""
Monthly Transaction Summary

Runs the dashboard aggregations over a local copy of the transaction dataset,
without starting the HTTP service.

Usage:
    python scripts/summarize_month.py product_transaction.json --month March
    python scripts/summarize_month.py product_transaction.json --month March --json

Arguments:
    file_path: Path to a dataset JSON file (a list of records, or {"transactions": [...]})
    --month: Full month name, e.g. "March"
    --json: Output raw JSON instead of formatted text
"""
import argparse
import json
import os
import sys
from dataclasses import asdict

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from domain.entities import Transaction
from domain.exceptions import DatasetFetchError, InvalidMonthError
from domain.services import (
    filter_by_month,
    require_month_number,
    compute_statistics,
    compute_bar_chart,
    compute_pie_chart,
)
from infrastructure.clients.transaction_repo_api import TransactionRepoAPI


def load_transactions(file_path: str) -> list[Transaction]:
    """Load transactions from a dataset JSON file."""
    with open(file_path, "r") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = raw.get("transactions", raw.get("data"))
    if not isinstance(raw, list):
        raise DatasetFetchError(f"{file_path} does not hold a list of transactions")
    return [TransactionRepoAPI.map_to_domain_entity(t) for t in raw]


def summarize(transactions: list[Transaction], month: str) -> dict:
    """Statistics, bar and pie data for one month, shaped like the HTTP responses."""
    in_month = filter_by_month(transactions, require_month_number(month))
    stats = compute_statistics(in_month, month=month)
    return {
        "statistics": {
            "month": stats.month,
            "totalSaleAmount": stats.total_sale_amount,
            "totalSoldItems": stats.total_sold_items,
            "totalNotSoldItems": stats.total_not_sold_items,
        },
        "barChartData": [asdict(b) for b in compute_bar_chart(in_month)],
        "pieChartData": [asdict(c) for c in compute_pie_chart(in_month)],
    }


def format_result(result: dict) -> str:
    """Format result for human-readable output."""
    stats = result["statistics"]
    lines = []

    lines.append("=" * 60)
    lines.append(f"TRANSACTIONS SUMMARY: {stats['month'].upper()}")
    lines.append("=" * 60)

    lines.append("\n--- Statistics ---")
    lines.append(f"Total sale amount: {stats['totalSaleAmount']:.2f}")
    lines.append(f"Sold items:        {stats['totalSoldItems']}")
    lines.append(f"Not sold items:    {stats['totalNotSoldItems']}")

    lines.append("\n--- Price ranges ---")
    for bucket in result["barChartData"]:
        lines.append(f"{bucket['range']:>10}  {'#' * bucket['count']} {bucket['count']}")

    lines.append("\n--- Categories ---")
    if not result["pieChartData"]:
        lines.append("(no transactions)")
    for group in result["pieChartData"]:
        lines.append(f"{group['category']}: {group['count']}")

    lines.append("")
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Summarize one month of the transaction dataset")
    parser.add_argument("file_path", help="Path to dataset JSON file")
    parser.add_argument("--month", required=True, help='Full month name, e.g. "March"')
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args(argv)

    if not os.path.exists(args.file_path):
        print(f"Error: File not found: {args.file_path}", file=sys.stderr)
        return 1

    try:
        transactions = load_transactions(args.file_path)
    except (DatasetFetchError, json.JSONDecodeError) as e:
        print(f"Error: invalid dataset: {e}", file=sys.stderr)
        return 3

    try:
        result = summarize(transactions, args.month)
    except InvalidMonthError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
