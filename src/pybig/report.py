"""Sort and print the discovered files."""

import functools
import os

from pybig.comparators import Comparator, FileRecord
from pybig.config import Configuration
from pybig.formatting import colored, format_size


def sort_records(records: list[FileRecord], comparator: Comparator) -> None:
    """Sort records in place with a comparator."""
    records.sort(key=functools.cmp_to_key(comparator))


def format_record(record: FileRecord, config: Configuration) -> str:
    """Return the report line for a record: absolute path, two spaces, size."""
    size = format_size(record.size, config.metric, config.number_locale)
    return f"{os.path.abspath(record.name)}  {size}"


def print_records(
    records: list[FileRecord],
    config: Configuration,
    use_color: bool = False,
) -> None:
    """
    Sort the records and print one line per file.

    Args:
        records (list[FileRecord]):
            Records to print; sorted in place.
        config (Configuration):
            Supplies the comparator and the size rendering.
        use_color (bool):
            Whether to print the lines in blue.

    """
    sort_records(records, config.comparator)
    for record in records:
        line = format_record(record, config)
        print(colored(line, "34") if use_color else line)
