"""Create the night slip tables, or check that they exist.

    python scripts/init_db.py          # apply database/schema.sql
    python scripts/init_db.py --check  # only report missing tables
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.night_slip.night_slip.database.bootstrap import apply_schema, list_tables
from src.night_slip.night_slip.database.connection import DBConfig

REQUIRED_TABLES = ("tracked_dates", "members", "attendance")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--check", action="store_true", help="do not apply the schema")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_mapping(db_config)

    if not args.check:
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

    missing = sorted(set(REQUIRED_TABLES) - set(list_tables(db_config)))
    where = f"{target.user}@{target.host}:{target.port}/{target.database}"
    if missing:
        print(f"MISSING in {where}: {', '.join(missing)}")
        return 1

    print(f"OK: {where} has {', '.join(REQUIRED_TABLES)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
