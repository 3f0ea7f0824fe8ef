# src/kiwi/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the data file), then runs the
console REPL until "bye". argv is ignored.

Exit codes: 0 after a normal session, 1 when startup I/O fails.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = level_from_name(settings.log_level)
    try:
        setup_logging(log_file=settings.log_file, console_level=console_level)
    except OSError as e:
        print(f"Cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError:
        logger.exception("Cannot prepare data directory %s", settings.data_dir)
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
