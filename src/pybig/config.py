"""
Command-line configuration.

Arguments are read left to right by an argparse parser whose options each
carry their own validator. Any failure is raised as a UsageError naming the
condition, so the caller can print the localized message and the usage text.
"""

import argparse
import logging
import math
import os
import sys
from dataclasses import dataclass
from typing import Mapping

from pybig.comparators import SORTS, Comparator, compare_none
from pybig.errors import EXIT_UNRECOGNIZED, Condition, UsageError
from pybig.formatting import (
    DEFAULT_LOCALE,
    InvalidLocale,
    normalize_locale_tag,
    validate_number_locale,
)
from pybig.messages import LOCALE_DIR, MessageCatalog
from pybig.paths import DEFAULT_PATTERN, resolve_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Validated settings for one run.

    Attributes:
        pattern (str):
            Glob pattern expanded recursively during discovery.
        comparator (Comparator):
            Ordering applied to the records before printing.
        sort (str | None):
            The sort keyword the comparator came from, if any.
        metric (bool):
            Render sizes in binary units instead of grouped bytes.
        threshold (float):
            Minimum size in bytes for a file to be reported.
        locale (str):
            Locale of the active message catalog.
        number_locale (str):
            Locale used to format numbers; always a validated tag.
        debug (bool):
            Whether diagnostic logging was requested.

    """

    pattern: str = DEFAULT_PATTERN
    comparator: Comparator = compare_none
    sort: str | None = None
    metric: bool = False
    threshold: float = 0.0
    locale: str = DEFAULT_LOCALE
    number_locale: str = DEFAULT_LOCALE
    debug: bool = False


class LocaleState:
    """
    The locale in effect while arguments are being parsed.

    Switching locale validates the number format first and only then swaps
    the catalog, so a rejected tag leaves both untouched.
    """

    def __init__(self, directory=LOCALE_DIR) -> None:
        self.directory = directory
        self.number_locale = DEFAULT_LOCALE
        self.catalog = MessageCatalog.load(DEFAULT_LOCALE, directory)

    def switch(self, tag: str) -> str:
        """
        Adopt a locale for both numbers and messages.

        Args:
            tag (str):
                A language-region tag in any casing, e.g. "de-de".

        Returns:
            str:
                The normalized tag.

        Raises:
            InvalidLocale: If the tag is malformed or unknown.

        """
        normalized = validate_number_locale(normalize_locale_tag(tag))
        self.catalog = MessageCatalog.load(normalized, self.directory)
        self.number_locale = normalized
        return normalized

    def seed_from_environment(self, environ: Mapping[str, str] = os.environ) -> None:
        """Adopt the locale named by LANG, ignoring values that do not work."""
        lang = environ.get("LANG")
        if not lang:
            return
        try:
            self.switch(lang)
        except InvalidLocale as e:
            logger.debug(f"Ignoring LANG={lang!r}: {e}")


def parse_threshold(value: str) -> float:
    """
    Parse a size threshold into bytes.

    Supports plain numbers, and sizes with a binary unit such as '10KiB',
    '1.5MB' or '2g'. All units are 1024-based.

    Args:
        value (str):
            Threshold string to parse.

    Returns:
        float:
            Threshold in bytes.

    Raises:
        ValueError: If the value is not a finite, non-negative size.

    Examples:
        >>> parse_threshold('1024')
        1024.0
        >>> parse_threshold('1.5KiB')
        1536.0

    """
    text = value.strip().upper()
    units = {
        "K": 1024,
        "M": 1024**2,
        "G": 1024**3,
        "T": 1024**4,
        "P": 1024**5,
        "E": 1024**6,
    }

    # Find the longest matching suffix: "KiB", "KB", "K" or a bare "B".
    multiplier = 1
    for suffix in ("IB", "B", ""):
        if suffix and not text.endswith(suffix):
            continue
        stem = text[: len(text) - len(suffix)]
        if stem[-1:] in units:
            text, multiplier = stem[:-1].strip(), units[stem[-1]]
            break
        if suffix == "B":
            text = stem.strip()
            break

    # float() accepts "nan" and "inf", which are not sizes.
    threshold = float(text) * multiplier
    if not math.isfinite(threshold) or threshold < 0:
        raise ValueError(f"Invalid threshold: '{value}'")
    return threshold


def parse_sort(value: str) -> str:
    """Return the sort keyword in lower case, or raise ValueError."""
    keyword = value.strip().lower()
    if keyword not in SORTS:
        raise ValueError(f"Unknown sort '{value}', expected one of {', '.join(SORTS)}")
    return keyword


class UsageParser(argparse.ArgumentParser):
    """
    ArgumentParser reporting unrecognized arguments as a HELP condition.

    Option names are matched case-insensitively ("-P", "--PATH=x"); the
    values that follow them keep their case.
    """

    def __init__(self, *args, **kwargs):
        self.option_names: set[str] = set()
        super().__init__(*args, **kwargs)

    def add_argument(self, *args, **kwargs):
        action = super().add_argument(*args, **kwargs)
        self.option_names.update(action.option_strings)
        return action

    def fold_option(self, arg: str) -> str:
        """Lower-case arg if it names one of the parser's options."""
        if not arg.startswith("-"):
            return arg
        name, sep, value = arg.partition("=")
        if name.lower() in self.option_names:
            return f"{name.lower()}{sep}{value}"
        return arg

    def parse_args(self, args=None, namespace=None):
        if args is None:
            args = sys.argv[1:]
        return super().parse_args([self.fold_option(arg) for arg in args], namespace)

    def error(self, message: str):
        logger.debug(f"Argument error: {message}")
        raise UsageError(Condition.HELP, exit_code=EXIT_UNRECOGNIZED)


class HelpAction(argparse.Action):
    """Stop parsing and ask for the usage text."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        raise UsageError(Condition.HELP)


def build_parser(state: LocaleState) -> tuple[UsageParser, dict[str, Condition]]:
    """
    Build the argument parser.

    Args:
        state (LocaleState):
            Receives locale switches as soon as -l/--localization is read.

    Returns:
        tuple[UsageParser, dict[str, Condition]]:
            The parser, and the condition raised by each value-taking option
            when its value is missing or rejected, keyed by the option name
            argparse reports (e.g. "-p/--path").

    """
    parser = UsageParser(
        prog="pybig",
        description="List the files at or above a size threshold.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    conditions: dict[str, Condition] = {}

    def add_option(*flags, condition: Condition | None = None, **kwargs):
        action = parser.add_argument(*flags, **kwargs)
        if condition is not None:
            conditions["/".join(action.option_strings)] = condition

    add_option("-h", "--help", action=HelpAction, help="Show the usage text and exit")
    add_option(
        "-p",
        "--path",
        type=resolve_pattern,
        default=None,
        condition=Condition.BAD_PATH,
        help="File, directory or glob to scan (default: current directory)",
    )
    add_option(
        "-s",
        "--sort",
        type=parse_sort,
        default=None,
        condition=Condition.BAD_SORT,
        help="Sort by alpha, exten or size (size is largest first)",
    )
    add_option(
        "-m",
        "--metric",
        action="store_true",
        help="Print sizes in binary units (KiB, MiB, GiB)",
    )
    add_option(
        "-t",
        "--threshold",
        type=parse_threshold,
        default=None,
        condition=Condition.BAD_THRESHOLD,
        help="Minimum file size in bytes (default: 0)",
    )
    add_option(
        "-l",
        "--localization",
        type=state.switch,
        default=None,
        condition=Condition.BAD_LOCALE,
        help="Language and number format, e.g. en-US",
    )
    add_option(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser, conditions


def parse_arguments(argv: list[str], state: LocaleState) -> Configuration:
    """
    Turn the argument vector into a Configuration.

    Args:
        argv (list[str]):
            Arguments without the program name.
        state (LocaleState):
            The locale in effect; updated by -l/--localization so that later
            errors are reported in the new language.

    Returns:
        Configuration:
            The validated configuration.

    Raises:
        UsageError: On help requests and on any invalid argument.

    """
    parser, conditions = build_parser(state)
    try:
        args = parser.parse_args(argv)
    except argparse.ArgumentError as e:
        logger.debug(f"Argument error: {e}")
        condition = conditions.get(e.argument_name or "", Condition.HELP)
        if condition is Condition.HELP:
            raise UsageError(condition, exit_code=EXIT_UNRECOGNIZED) from e
        raise UsageError(condition) from e

    config = Configuration(
        pattern=args.path or DEFAULT_PATTERN,
        comparator=SORTS[args.sort] if args.sort else compare_none,
        sort=args.sort,
        metric=args.metric,
        threshold=args.threshold if args.threshold is not None else 0.0,
        locale=state.catalog.locale,
        number_locale=state.number_locale,
        debug=args.debug,
    )
    logger.debug(f"Configuration: {config}")
    return config
