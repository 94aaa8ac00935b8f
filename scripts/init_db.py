#!/usr/bin/env python3
"""
Create the status and log tables against the configured database.
Run it once per environment before starting the API, or set API_CREATE_SCHEMA_ON_STARTUP instead.
It reads DATABASE_URL from `.env` or the process environment and exits non-zero on failure.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from activity_api.api.api_config import get_api_config  # noqa: E402
from activity_api.api.db_access import DatabaseClient  # noqa: E402
from activity_api.api.ddl import LOG_TABLE, STATUS_TABLE, apply_schema  # noqa: E402
from activity_api.common.logging import configure_logging  # noqa: E402

logger = logging.getLogger("init_db")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create activity API tables")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    configure_logging()

    database_url = args.database_url
    if database_url is None:
        database_url = get_api_config().database_url

    db = DatabaseClient(database_url=database_url)
    if not db.can_connect():
        logger.error("Database is not reachable")
        return 1

    apply_schema(db.engine)
    print(
        json.dumps(
            {
                STATUS_TABLE: db.table_exists(STATUS_TABLE),
                LOG_TABLE: db.table_exists(LOG_TABLE),
            },
            indent=2,
        )
    )
    db.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
