"""Create the database (if missing) and apply database/schema.sql."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.workforce_attendance.workforce_attendance.database.bootstrap import apply_schema, list_tables
from src.workforce_attendance.workforce_attendance.main import SCHEMA_PATH, configure_logging, load_settings


def main() -> int:
    settings = load_settings()
    configure_logging(settings)
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    print(f"OK: schema applied to {db_config.get('database')} on {db_config.get('host')} ({len(tables)} tables)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
