"""Create (or reset) the blogdesk tables on the configured database."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from blogdesk.db import create_tables, drop_tables

logger = logging.getLogger(__name__)


def init_db(*, reset: bool = False) -> None:
    """Create all tables, dropping existing ones first when ``reset`` is set."""
    if reset:
        logger.warning("Dropping all blogdesk tables")
        drop_tables()
    create_tables()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the blogdesk database tables")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop existing tables before creating them again.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        init_db(reset=args.drop_tables)
    except SQLAlchemyError as exc:
        logger.error("Database initialization failed: %s", exc)
        return 1
    logger.info("Database initialized")
    return 0


if __name__ == "__main__":
    sys.exit(main())
