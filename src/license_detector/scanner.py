"""Directory scanner for license files.

Looks at the direct entries of a directory and reports the regular files
whose names look like license files (see ``license_detector.candidates``).
Subdirectories are never descended into.
"""

import logging
import os
from pathlib import Path
from typing import Union

from license_detector.candidates import DEFAULT_LICENSE_FILES, is_candidate

logger = logging.getLogger(__name__)


def search_dir(directory: Union[str, Path]) -> list[Path]:
    """Find the license files in a directory.

    Names are compared case-insensitively. Results follow the order of
    DEFAULT_LICENSE_FILES rather than the file system's listing order, so
    the output is stable across platforms. If a case-sensitive file system
    holds several spellings of the same candidate (``LICENSE`` and
    ``license``), all of them are returned, sorted by name.

    Args:
        directory: Directory to search.

    Returns:
        Paths of the matching files, joined onto ``directory``.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        PermissionError: If the directory cannot be listed.
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    files_by_name: dict[str, list[str]] = {}
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file() or not is_candidate(entry.name):
                continue
            files_by_name.setdefault(entry.name.lower(), []).append(entry.name)

    found = []
    for candidate in DEFAULT_LICENSE_FILES:
        for name in sorted(files_by_name.get(candidate.lower(), [])):
            logger.debug(f"Found license file candidate: {name}")
            found.append(directory / name)

    return found
