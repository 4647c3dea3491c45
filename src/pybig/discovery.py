"""Expand the search pattern and keep the files reaching the threshold."""

import glob
import logging
import os
import stat
from typing import Callable, Iterable

from pybig.comparators import FileRecord
from pybig.errors import Condition, UsageError

logger = logging.getLogger(__name__)


def find_files(pattern: str) -> list[str]:
    """
    Expand a pattern recursively, leaving out directories.

    Args:
        pattern (str):
            Glob pattern; "**" matches any number of nested directories.

    Returns:
        list[str]:
            Matching paths in enumeration order. Entries starting with '.'
            are only matched when the pattern names them explicitly.

    """
    paths = [path for path in glob.glob(pattern, recursive=True) if not os.path.isdir(path)]
    logger.debug(f"Pattern '{pattern}' expanded to {len(paths)} candidate files")
    return paths


def collect_big_files(
    paths: Iterable[str],
    threshold: float = 0,
    progress_callback: Callable[[], None] | None = None,
) -> list[FileRecord]:
    """
    Stat each path and keep the regular files of at least threshold bytes.

    Args:
        paths (Iterable[str]):
            Candidate paths, usually from find_files.
        threshold (float):
            Minimum size in bytes.
        progress_callback (Callable[[], None] | None):
            Called once per path (None for no progress).

    Returns:
        list[FileRecord]:
            One record per file that reached the threshold.

    Raises:
        UsageError: STAT_FAILURE if any path cannot be stat'ed.

    """
    records = []
    for path in paths:
        if progress_callback:
            progress_callback()
        try:
            st = os.stat(path)
        except OSError as e:
            raise UsageError(Condition.STAT_FAILURE, detail=str(e)) from e
        if not stat.S_ISREG(st.st_mode):
            continue
        if st.st_size < threshold:
            continue
        records.append(FileRecord(name=path, size=st.st_size))
    logger.debug(f"{len(records)} files reach the threshold of {threshold} bytes")
    return records
