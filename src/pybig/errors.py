"""Usage conditions raised while configuring or running a scan."""

from enum import Enum


class Condition(Enum):
    """
    Enumeration of the conditions that terminate a run early.

    Each value is the message key looked up in the active catalog.
    """

    HELP = "HELP"
    BAD_PATH = "BAD_PATH"
    BAD_SORT = "BAD_SORT"
    BAD_THRESHOLD = "BAD_THRESHOLD"
    BAD_LOCALE = "BAD_LOCALE"
    STAT_FAILURE = "STAT_FAILURE"


EXIT_CODES = {
    Condition.HELP: 0,
    Condition.BAD_PATH: 3,
    Condition.BAD_SORT: 4,
    Condition.BAD_THRESHOLD: 5,
    Condition.BAD_LOCALE: 6,
    Condition.STAT_FAILURE: 7,
}

# Help shown because of an unrecognized argument rather than -h/--help.
EXIT_UNRECOGNIZED = 2


class UsageError(Exception):
    """
    Raised when the run must stop and print the usage text.

    Attributes:
        condition (Condition):
            What went wrong; selects the message and the exit code.
        detail (str | None):
            Raw text to print instead of the catalog message (used for
            stat failures, which carry the operating system's error).
        exit_code (int):
            Process exit status for this condition.

    """

    def __init__(
        self,
        condition: Condition,
        detail: str | None = None,
        exit_code: int | None = None,
    ) -> None:
        super().__init__(detail or condition.value)
        self.condition = condition
        self.detail = detail
        self.exit_code = EXIT_CODES[condition] if exit_code is None else exit_code
