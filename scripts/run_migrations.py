#!/usr/bin/env python3
"""Apply schema migrations.

Usage:
    python scripts/run_migrations.py                 # upgrade to head
    python scripts/run_migrations.py downgrade -1    # step back one revision
"""

import argparse
import logging
import sys

import logfire
from alembic import command
from alembic.config import Config

from social.config import Settings
from social.util.logging import setup_logging
from social.util.observability import configure_logfire

logger = logging.getLogger("social.scripts.run_migrations")


def main(argv: list[str] | None = None) -> int:
    """Upgrade or downgrade the schema and report failures to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("direction", nargs="?", choices=["upgrade", "downgrade"], default="upgrade")
    parser.add_argument("revision", nargs="?", default=None)
    args = parser.parse_args(argv)
    revision = args.revision or ("head" if args.direction == "upgrade" else "-1")

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    # migrations/env.py reads the database URL from Settings
    config = Config("alembic.ini")
    logger.info("Running %s to %s", args.direction, revision)
    try:
        if args.direction == "upgrade":
            command.upgrade(config, revision)
        else:
            command.downgrade(config, revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            direction=args.direction,
            revision=revision,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Database migrations completed", direction=args.direction, revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
