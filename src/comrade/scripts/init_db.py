"""Create (or recreate) the backend tables for the configured database."""
from __future__ import annotations

import argparse
import logging

from comrade.core.settings import settings
from comrade.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--drop",
        action="store_true",
        help="drop every table before creating them again",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    if args.drop:
        logger.warning("Dropping all tables in %s", settings.effective_database_url)
        drop_tables()
    create_tables()
    logger.info("Database initialized at %s", settings.effective_database_url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
