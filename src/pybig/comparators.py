"""
File records and the comparators used to order them.

Every comparator takes two FileRecord objects and returns a negative, zero or
positive integer, so it can be handed to functools.cmp_to_key.
"""

import os
import unicodedata
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FileRecord:
    """A discovered file that passed the size threshold.

    Attributes:
        name (str):
            The path exactly as the enumeration returned it.
        size (int):
            The file size in bytes.

    """

    name: str
    size: int


Comparator = Callable[[FileRecord, FileRecord], int]


def _sign(value: int | float) -> int:
    return (value > 0) - (value < 0)


def collation_key(text: str) -> tuple[str, str]:
    """
    Build a locale-neutral collation key for text.

    Accents and case are ignored at the first level, so "Éclair" sorts next
    to "eclair"; the raw string breaks ties to keep the order total.

    Examples:
        >>> collation_key("Éa")
        ('ea', 'Éa')

    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def compare_strings(a: str, b: str) -> int:
    """Compare two strings by their collation keys."""
    key_a, key_b = collation_key(a), collation_key(b)
    if key_a == key_b:
        return 0
    return -1 if key_a < key_b else 1


def extension(name: str) -> str:
    """
    Return the text after the last dot of the base name.

    A name without a dot has no extension, and its whole base name is used
    instead, so "Makefile" sorts among extensions starting with "M".

    Examples:
        >>> extension("./docs/report.tar.gz")
        'gz'
        >>> extension("./Makefile")
        'Makefile'

    """
    base = os.path.basename(name)
    return base[base.rfind(".") + 1 :]


def compare_none(a: FileRecord, b: FileRecord) -> int:
    """Leave records in discovery order."""
    return 0


def compare_name(a: FileRecord, b: FileRecord) -> int:
    """Order records alphabetically by path."""
    return compare_strings(a.name, b.name)


def compare_extension(a: FileRecord, b: FileRecord) -> int:
    """Order records alphabetically by extension."""
    return compare_strings(extension(a.name), extension(b.name))


def compare_size(a: FileRecord, b: FileRecord) -> int:
    """Order records by size, smallest first."""
    return _sign(a.size - b.size)


def descending(comparator: Comparator) -> Comparator:
    """
    Reverse the ordering produced by a comparator.

    Args:
        comparator (Comparator):
            The comparator to invert.

    Returns:
        Comparator:
            A comparator returning the negated result.

    """

    def reversed_comparator(a: FileRecord, b: FileRecord) -> int:
        return -comparator(a, b)

    reversed_comparator.__name__ = f"descending_{comparator.__name__}"
    return reversed_comparator


SORTS: dict[str, Comparator] = {
    "alpha": compare_name,
    "exten": compare_extension,
    "size": descending(compare_size),
}
