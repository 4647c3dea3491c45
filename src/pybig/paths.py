"""Turn a user path expression into the pattern used for discovery."""

import glob
import logging
import os

from pybig.errors import Condition, UsageError

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."
RECURSIVE_SUFFIX = "**"
DEFAULT_PATTERN = os.path.join(CURRENT_DIRECTORY, RECURSIVE_SUFFIX)


def recursive_pattern(expression: str) -> str:
    """Return the pattern matching everything below expression."""
    return os.path.join(expression, RECURSIVE_SUFFIX)


def resolve_pattern(expression: str) -> str:
    """
    Decide which pattern discovery should expand for a path expression.

    The expression is expanded once, without recursion, to learn what it
    refers to. A single directory (or the "." shorthand) means "everything
    below it"; a file, or a glob matching several entries, is kept as given.

    Args:
        expression (str):
            A path or glob typed by the user.

    Returns:
        str:
            The pattern to expand recursively during discovery.

    Raises:
        UsageError: BAD_PATH if the expression matches nothing.

    """
    matches = glob.glob(expression)
    if not matches and os.path.lexists(expression):
        # A literal path containing glob metacharacters, e.g. "logs[1]".
        expression = glob.escape(expression)
        matches = glob.glob(expression)
    logger.debug(f"Path '{expression}' matched {len(matches)} entries")
    if not matches:
        raise UsageError(Condition.BAD_PATH)

    if expression == CURRENT_DIRECTORY:
        return recursive_pattern(expression)
    if len(matches) == 1 and os.path.isdir(matches[0]):
        return recursive_pattern(expression)
    return expression
