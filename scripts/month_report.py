#!/usr/bin/env python3
"""
Month report for a running Transaction Insights API.

Optionally re-seeds the store, then fetches the combined view for a month
and prints statistics, the price histogram and the category breakdown.

Usage:
    python scripts/month_report.py 3
    python scripts/month_report.py march --seed
    python scripts/month_report.py 11 --base-url http://localhost:8000 --json

Arguments:
    month: Month number (1-12) or name
    --base-url: API base URL (default: $API_BASE_URL or http://localhost:8000)
    --seed: Call /api/seed before building the report
    --json: Output raw JSON instead of formatted text
"""
import argparse
import json
import os
import sys

import httpx


def format_report(month: str, report: dict) -> str:
    """Format the combined report for human-readable output."""
    lines = []
    stats = report["statistics"]

    lines.append("=" * 60)
    lines.append(f"TRANSACTIONS REPORT - month {month}")
    lines.append("=" * 60)
    lines.append(f"\nTotal sale amount: {stats['totalSaleAmount']:.2f}")
    lines.append(f"Sold items:        {stats['soldItems']}")
    lines.append(f"Not sold items:    {stats['notSoldItems']}")
    lines.append(f"Transactions:      {len(report['transactions'])}")

    lines.append("\n--- Price ranges ---")
    widest = max((entry["count"] for entry in report["barChart"]), default=0) or 1
    for entry in report["barChart"]:
        bar = "#" * round(40 * entry["count"] / widest)
        lines.append(f"{entry['range']:>10} | {entry['count']:>4} {bar}")

    lines.append("\n--- Categories ---")
    for entry in report["pieChart"]:
        lines.append(f"{entry['category']:<25} {entry['count']:>4}")

    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the month report of a Transaction Insights API")
    parser.add_argument("month", help="Month number (1-12) or name")
    parser.add_argument("--base-url", default=os.getenv("API_BASE_URL", "http://localhost:8000"))
    parser.add_argument("--seed", action="store_true", help="Re-seed the store first")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=30.0) as client:
        if args.seed:
            response = client.get("/api/seed")
            if response.status_code != 200:
                print(f"Seeding failed ({response.status_code}): {response.text}", file=sys.stderr)
                return 1
            print(response.json()["message"], file=sys.stderr)

        response = client.get("/api/transactions/combined", params={"month": args.month})
        if response.status_code != 200:
            print(f"Report failed ({response.status_code}): {response.text}", file=sys.stderr)
            return 1
        report = response.json()

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(format_report(args.month, report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
