#!/usr/bin/env python3
"""
Command-line client for a running Mood Tracker API.

Usage:
    python scripts/mood_client.py today
    python scripts/mood_client.py submit overall=1 home=2 work=-1 health=0 sleep=1 social=2
    python scripts/mood_client.py history --limit 7
    python scripts/mood_client.py delete 2024-12-08
"""
import argparse
import json
import os
import sys

import httpx
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

API_URL = os.environ.get("MOOD_API_URL", "http://localhost:3001")
TIMEOUT = 10.0  # seconds


def _parse_ratings(pairs: list[str]) -> dict:
    record = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"Expected dimension=value, got {pair!r}")
        record[key] = float(value)
    return record


def _show(response: httpx.Response) -> int:
    try:
        body = response.json()
    except ValueError:
        body = response.text
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0 if response.is_success else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Mood Tracker API client")
    parser.add_argument("--url", default=API_URL, help="API base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("today", help="Show today's mood")
    submit = sub.add_parser("submit", help="Replace today's mood")
    submit.add_argument("ratings", nargs="+", help="dimension=value pairs")
    history = sub.add_parser("history", help="Show logged days, newest first")
    history.add_argument("--limit", type=int, default=10)
    delete = sub.add_parser("delete", help="Delete a day's mood")
    delete.add_argument("date", help="YYYY-MM-DD")
    sub.add_parser("insights", help="Show per-dimension trends")

    args = parser.parse_args()

    try:
        with httpx.Client(base_url=args.url, timeout=TIMEOUT) as client:
            if args.command == "today":
                return _show(client.get("/api/today"))
            if args.command == "submit":
                response = client.put("/api/today", json=_parse_ratings(args.ratings))
                if not response.is_success:
                    return _show(response)
                # Confirm against persisted state
                return _show(client.get("/api/today"))
            if args.command == "history":
                return _show(client.get("/api/history", params={"limit": args.limit}))
            if args.command == "delete":
                return _show(client.delete(f"/api/moods/{args.date}"))
            if args.command == "insights":
                return _show(client.get("/api/insights"))
    except httpx.ConnectError:
        print(f"Cannot connect to Mood Tracker API at {args.url}", file=sys.stderr)
        return 2
    return 1


if __name__ == "__main__":
    sys.exit(main())
