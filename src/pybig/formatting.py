"""
Locale tags, byte-count rendering and terminal colouring.

Numbers are formatted with Babel so that any CLDR locale can be validated and
used, independently of the locales installed on the host.
"""

import logging

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Binary prefixes, 1024-based.
UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]

METRIC_PATTERN = "#,##0.##"


class InvalidLocale(ValueError):
    """Raised when a tag cannot be used to format numbers."""


def normalize_locale_tag(tag: str) -> str:
    """
    Normalize a language-region tag to the "ll-RR" form.

    Accepts either "-" or "_" as separator and drops any encoding or modifier
    suffix, as found in POSIX locale variables.

    Args:
        tag (str):
            A tag such as "EN-us", "de_DE.UTF-8" or "fr_FR@euro".

    Returns:
        str:
            The normalized tag, e.g. "en-US".

    Raises:
        InvalidLocale: If the tag is not made of a language and a region.

    Examples:
        >>> normalize_locale_tag("de_DE.UTF-8")
        'de-DE'
        >>> normalize_locale_tag("EN-us")
        'en-US'

    """
    base = tag.strip().split(".", 1)[0].split("@", 1)[0]
    parts = base.replace("_", "-").split("-")
    if len(parts) != 2 or not all(parts):
        raise InvalidLocale(f"Expected a language-REGION tag, got '{tag}'")
    language, region = parts
    return f"{language.lower()}-{region.upper()}"


def validate_number_locale(tag: str) -> str:
    """
    Check that numbers can be formatted with the given locale tag.

    The integer 1 is formatted with the tag; the tag is returned unchanged
    when that succeeds, so callers only adopt tags that work.

    Args:
        tag (str):
            A "ll-RR" locale tag.

    Returns:
        str:
            The same tag.

    Raises:
        InvalidLocale: If Babel does not know the locale.

    """
    try:
        format_decimal(1, locale=Locale.parse(tag, sep="-"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidLocale(f"Unsupported number locale '{tag}': {e}") from e
    logger.debug(f"Number locale '{tag}' accepted")
    return tag


def human_size_parts(size: float) -> tuple[float, str]:
    """
    Scale a size in bytes to the largest binary unit it reaches.

    Args:
        size (int | float):
            Size in bytes.

    Returns:
        tuple[float, str]:
            Tuple of (scaled_value, unit) where unit is one of UNITS.

    Examples:
        >>> human_size_parts(1536)
        (1.5, 'KiB')
        >>> human_size_parts(10)
        (10.0, 'B')

    """
    i = 0
    size_f = float(size)
    while size_f >= 1024 and i < len(UNITS) - 1:
        size_f /= 1024
        i += 1
    return size_f, UNITS[i]


def format_size(size: int, metric: bool, number_locale: str = DEFAULT_LOCALE) -> str:
    """
    Render a byte count for display.

    Args:
        size (int):
            Size in bytes.
        metric (bool):
            Use binary units (KiB, MiB, ...) rounded to two decimals instead
            of the raw grouped integer.
        number_locale (str):
            A tag already accepted by validate_number_locale.

    Returns:
        str:
            E.g. "5,000,000" in raw mode or "4.77 MiB" in metric mode for
            the en-US locale.

    """
    locale = Locale.parse(number_locale, sep="-")
    if not metric:
        return format_decimal(size, locale=locale)
    value, unit = human_size_parts(size)
    value = round(value, 2)
    # 1023.999 KiB rounds to 1024; show it as 1 MiB instead.
    if value >= 1024 and unit != UNITS[-1]:
        value, unit = value / 1024, UNITS[UNITS.index(unit) + 1]
    return f"{format_decimal(value, format=METRIC_PATTERN, locale=locale)} {unit}"


def colored(text: str, color_code: str, light: bool = False) -> str:
    """
    Apply ANSI color codes to text.

    Args:
        text (str):
            Text to color
        color_code (str):
            ANSI color code (e.g., "31" for red, "34" for blue)
        light (bool):
            Whether to use light (bright) variant of the color

    Returns:
        str:
            Text wrapped with ANSI color codes

    """
    if light:
        color_code = f"1;{color_code}"
    return f"\033[{color_code}m{text}\033[0m"
