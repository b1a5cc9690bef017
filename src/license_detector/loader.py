"""Build License records from text, files and directories.

Usage::

    from license_detector.loader import license_from_dir

    lic = license_from_dir("path/to/project")
    # lic.spdx_id == "MIT"
    # lic.file == Path("path/to/project/LICENSE")
"""

import logging
from pathlib import Path
from typing import Union

from license_detector.errors import MultipleLicenseFilesError, NoLicenseFileError
from license_detector.models import License
from license_detector.scanner import search_dir

logger = logging.getLogger(__name__)


def license_from_text(spdx_id: str, text: str) -> License:
    """Create a License from a known type and text.

    No classification is performed; ``spdx_id`` is taken as given and may
    be empty.
    """
    return License(spdx_id=spdx_id, text=text)


def license_from_file(path: Union[str, Path]) -> License:
    """Read a license file and classify it.

    The file is decoded as strict UTF-8 with line endings preserved, so
    ``text`` is exactly the file's content.

    Args:
        path: Path to the license file.

    Returns:
        License with ``spdx_id``, ``text`` and ``file`` populated.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        UnrecognizedLicenseError: If the content matches no known license.
    """
    path = Path(path)

    if not path.is_file():
        raise FileNotFoundError(f"License file not found: {path}")

    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()

    lic = License(text=text, file=path)
    lic.guess_type()
    logger.debug(f"{path} is licensed under {lic.spdx_id}")
    return lic


def license_from_dir(directory: Union[str, Path]) -> License:
    """Locate the single license file in a directory and classify it.

    The directory must contain exactly one file that looks like a license
    file. When several are present none of them is picked: a stale
    secondary file could otherwise be reported as the project's license.

    Args:
        directory: Directory to search (not recursive).

    Returns:
        License read from the one license file found.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        NoLicenseFileError: If no license file is present.
        MultipleLicenseFilesError: If more than one license file is present.
        UnrecognizedLicenseError: If the license file's content matches no
            known license.
    """
    directory = Path(directory)
    paths = search_dir(directory)

    if not paths:
        raise NoLicenseFileError(directory)

    if len(paths) > 1:
        logger.warning(
            f"Refusing to choose between {len(paths)} license files in {directory}"
        )
        raise MultipleLicenseFilesError(directory, paths)

    return license_from_file(paths[0])


def license_from_path(path: Union[str, Path]) -> License:
    """Detect the license of a file or a directory.

    Directories are searched with ``license_from_dir``; anything else is
    read with ``license_from_file``.
    """
    path = Path(path)
    if path.is_dir():
        return license_from_dir(path)
    return license_from_file(path)
