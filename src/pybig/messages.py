"""
Localized messages and usage text.

Catalogs live next to this module as ``locales/msgs-<tag>.json`` and
``locales/help-<tag>.txt``. A missing file for the requested locale falls back
to the default locale, whose files always ship with the package.
"""

import json
import logging
from pathlib import Path

from pybig.formatting import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALE_DIR = Path(__file__).parent / "locales"


def _catalog_path(directory: Path, locale: str) -> Path:
    return directory / f"msgs-{locale}.json"


def _help_path(directory: Path, locale: str) -> Path:
    return directory / f"help-{locale}.txt"


class MessageCatalog:
    """Key to localized string lookup for one locale.

    Attributes:
        locale (str):
            The locale whose catalog was actually loaded; this is the default
            locale when the requested one had no catalog.
        directory (Path):
            Where the catalog and help files were looked up.

    """

    def __init__(self, locale: str, messages: dict[str, str], directory: Path) -> None:
        self.locale = locale
        self.messages = messages
        self.directory = directory

    @classmethod
    def load(cls, locale: str, directory: Path = LOCALE_DIR) -> "MessageCatalog":
        """
        Load the catalog for a locale, falling back to the default locale.

        Args:
            locale (str):
                A "ll-RR" tag.
            directory (Path):
                Directory holding the catalog files.

        Returns:
            MessageCatalog:
                The loaded catalog.

        Raises:
            OSError: If even the default catalog cannot be read.

        """
        try:
            with open(_catalog_path(directory, locale), encoding="utf-8") as f:
                messages = json.load(f)
            if not isinstance(messages, dict):
                raise ValueError(f"expected a JSON object, got {type(messages).__name__}")
        except (OSError, ValueError) as e:
            logger.debug(f"No usable catalog for '{locale}' ({e}), using {DEFAULT_LOCALE}")
            locale = DEFAULT_LOCALE
            with open(_catalog_path(directory, locale), encoding="utf-8") as f:
                messages = json.load(f)
        logger.debug(f"Loaded message catalog '{locale}'")
        return cls(locale, messages, directory)

    def get(self, key: str) -> str:
        """Return the message for key, or the key itself if it is missing."""
        return self.messages.get(key, key)

    def usage(self) -> str:
        """Return the usage text for this catalog's locale."""
        path = _help_path(self.directory, self.locale)
        if not path.is_file():
            logger.debug(f"No help text for '{self.locale}', using {DEFAULT_LOCALE}")
            path = _help_path(self.directory, DEFAULT_LOCALE)
        return path.read_text(encoding="utf-8")
