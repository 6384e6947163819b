#!/usr/bin/env python3
"""
Seed the mood store with demo history.

Writes one complete record per day for the last N days (today included)
into the JSON store used by the API. Values are drawn from a seeded random
walk so repeated runs produce the same history.

Usage:
    python scripts/seed_moods.py
    python scripts/seed_moods.py --days 120 --seed 7
    python scripts/seed_moods.py --path /tmp/moods.json --skip-rate 0.2
"""
import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

from dotenv import load_dotenv

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from server.mood_api.config import get_settings  # noqa: E402
from server.mood_api.models.dimensions import DIMENSION_IDS, MIN_RATING, MAX_RATING  # noqa: E402
from server.mood_api.store import JsonFileMoodStore  # noqa: E402
from server.mood_api.validation import to_date_key  # noqa: E402


# Load environment variables
load_dotenv()


def generate_history(days: int, seed: int, skip_rate: float, end: date) -> dict:
    """
    Build a date -> record mapping for the `days` days ending at `end`.

    Each dimension drifts by at most one step per day and stays on the
    [-2, 2] scale. Roughly skip_rate of days are left unlogged.
    """
    rng = random.Random(seed)
    current = {dim_id: 0 for dim_id in DIMENSION_IDS}
    history = {}

    for offset in range(days - 1, -1, -1):
        day = end - timedelta(days=offset)
        for dim_id in DIMENSION_IDS:
            step = rng.choice((-1, 0, 0, 1))
            current[dim_id] = max(MIN_RATING, min(MAX_RATING, current[dim_id] + step))
        if rng.random() < skip_rate:
            continue
        history[to_date_key(day)] = dict(current)

    return history


def main():
    """Seed the mood store."""
    parser = argparse.ArgumentParser(description="Seed the mood store with demo history")
    parser.add_argument("--days", type=int, default=90, help="Number of days to generate")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--skip-rate", type=float, default=0.1, help="Fraction of days left unlogged")
    parser.add_argument("--path", help="Store file (defaults to MOOD_DATA_PATH/db.json)")
    args = parser.parse_args()

    path = Path(args.path) if args.path else Path(get_settings().db_path)
    store = JsonFileMoodStore(path)

    print("=" * 60)
    print("Mood Tracker Seed Script")
    print("=" * 60)
    print(f"\nStore: {path}\n")

    history = generate_history(args.days, args.seed, args.skip_rate, date.today())
    for date_key, record in sorted(history.items()):
        store.put(date_key, record)

    print(f"Days covered:   {args.days}")
    print(f"Days logged:    {len(history)}")
    print(f"Records stored: {len(store.list_all())}")
    print("=" * 60)


if __name__ == "__main__":
    main()
