"""
pybig - list the big files below a path.

Scans a file, directory or glob for files at or above a size threshold and
prints their absolute paths with their sizes, sorted by name, extension or
size. Messages and number formats follow the selected locale.
"""

import logging
import sys

from pybig.config import LocaleState, parse_arguments
from pybig.discovery import collect_big_files, find_files
from pybig.errors import UsageError
from pybig.messages import MessageCatalog
from pybig.report import print_records

logger = logging.getLogger("pybig")

SPINNER_STATES = "|/-\\"


class ColorFormatter(logging.Formatter):
    """
    Custom logging formatter that adds ANSI color codes to log messages.

    This formatter applies color coding based on log levels for better
    readability in terminal output.
    """

    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, "")
        message = super().format(record)
        if color:
            message = f"{color}{message}{self.RESET}"
        return message


def setup_logging(debug: bool = False) -> None:
    """Attach a colored stderr handler to the package logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def usage(catalog: MessageCatalog, error: UsageError) -> int:
    """
    Print the reason for stopping, then the usage text.

    Args:
        catalog (MessageCatalog):
            The catalog active when the error was raised.
        error (UsageError):
            The condition that stopped the run.

    Returns:
        int:
            The exit code for the condition.

    """
    print(error.detail or catalog.get(error.condition.value))
    print(catalog.usage())
    return error.exit_code


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for pybig.

    Parses the arguments, expands the search pattern, filters the files by
    size and prints the report.

    Args:
        argv (list[str] | None):
            Arguments without the program name (default: sys.argv[1:]).

    Returns:
        int:
            Process exit code.

    """
    if argv is None:
        argv = sys.argv[1:]
    setup_logging()

    state = LocaleState()
    state.seed_from_environment()

    # Set up progress tracking
    show_progress = sys.stderr.isatty()
    scanned_count = 0

    def progress_callback():
        nonlocal scanned_count
        scanned_count += 1
        state_char = SPINNER_STATES[scanned_count % len(SPINNER_STATES)]
        label = state.catalog.get("SCANNING")
        print(f"\r{label} {state_char} {scanned_count}", end="", file=sys.stderr, flush=True)

    def clear_progress():
        if scanned_count:
            print("\r\033[K", end="", file=sys.stderr, flush=True)

    try:
        config = parse_arguments(argv, state)
        if config.debug:
            setup_logging(debug=True)
        logger.debug(f"Scanning '{config.pattern}'")
        paths = find_files(config.pattern)
        records = collect_big_files(
            paths,
            config.threshold,
            progress_callback if show_progress else None,
        )
    except UsageError as e:
        clear_progress()
        return usage(state.catalog, e)
    clear_progress()

    if not records:
        print(state.catalog.get("NOTHING_ABOVE_THRESHOLD"))
        return 0
    print_records(records, config, use_color=sys.stdout.isatty())
    return 0


if __name__ == "__main__":
    sys.exit(main())
