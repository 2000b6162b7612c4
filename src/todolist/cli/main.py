# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list into AppState, runs the console loop
in the main thread and saves the list once more on the way out.

Exit codes: 0 on normal quit, 1 when the task file cannot be read or written
or on any unexpected fatal error.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import TerminalIO, run_console_loop
from ..core.ports import ConsoleIO
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_file import PersistenceError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _report(text: str) -> None:
    print(f"todolist: {text}", file=sys.stderr, flush=True)


def run(settings, io: ConsoleIO) -> int:
    """Load, loop, save. Logging must already be configured."""
    logger.info("Starting %s...", getattr(settings, "app_name", "todolist"))

    try:
        state = create_initial_state(settings=settings)
    except PersistenceError as e:
        # Do not fall through to the exit save: it would overwrite the unreadable file.
        logger.error("Failed to load task list: %s", e)
        _report(f"Persistence failure: {e}")
        return EXIT_FAILURE

    run_console_loop(state, io)

    try:
        save_state(state, emit=io.emit)
    except PersistenceError as e:
        logger.error("Failed to save task list on exit: %s", e)
        _report(f"Persistence failure: {e}")
        return EXIT_FAILURE

    logger.info("Bye.")
    return EXIT_OK


def main(io: ConsoleIO | None = None) -> int:
    settings = get_settings()

    try:
        setup_logging(
            log_dir=settings.data_dir,
            console_level=level_from_name(settings.log_level),
        )
    except OSError as e:
        _report(f"cannot set up logging in {settings.data_dir}: {e}")
        return EXIT_FAILURE

    try:
        return run(settings, io or TerminalIO())
    except Exception:
        logger.exception("Unhandled error, exiting.")
        _report("unexpected error, see log for details.")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
