"""Replace all sessions with a year of synthetic data.

Usage:
    python scripts/seed_db.py                  # current year, random data
    python scripts/seed_db.py --year 2025      # a given year
    python scripts/seed_db.py --seed 42        # reproducible data
    python scripts/seed_db.py --init-schema    # create user_sessions first
    python scripts/seed_db.py --init-schema --schema-only
"""
from __future__ import annotations

import argparse
import importlib
import random
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_analytics.attendance_analytics.container import build_container
from src.attendance_analytics.attendance_analytics.database.bootstrap import apply_schema, list_tables
from src.attendance_analytics.attendance_analytics.seeding.generator import SessionGenerator

SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed user_sessions with synthetic attendance data")
    parser.add_argument("--year", type=int, default=date.today().year)
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")
    parser.add_argument("--init-schema", action="store_true", help="apply database/schema.sql before seeding")
    parser.add_argument("--schema-only", action="store_true", help="stop after --init-schema, insert nothing")
    return parser.parse_args(argv)


def _target(db_config: dict) -> str:
    return f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    if args.init_schema:
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        print(f"OK: user_sessions schema ready -> {_target(db_config)} (tables={len(list_tables(db_config))})")
        if args.schema_only:
            return

    container = build_container(db_config=db_config)
    records = SessionGenerator(rng=random.Random(args.seed)).generate_year(args.year)
    count = container.attendance_repo.replace_all(records)

    print(f"OK: Inserted {count} attendance records for {args.year} -> {_target(db_config)}")


if __name__ == "__main__":
    main()
