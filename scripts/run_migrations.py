#!/usr/bin/env python3
"""Apply Alembic migrations.

Usage: run_migrations.py [revision]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from discuss.config import Settings
from discuss.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    configure_logfire(Settings())
    revision = argv[0] if argv else "head"

    with logfire.span("Upgrading schema to {revision}", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception:
            # Fail the deploy rather than serve against a stale schema
            logfire.exception("Migration failed", revision=revision)
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
