"""Exceptions raised while detecting licenses.

Unreadable files and directories are reported with the builtin ``OSError``
family (``FileNotFoundError``, ``NotADirectoryError``, ``PermissionError``).
The classes below cover the outcomes specific to license detection. Each
also derives from the builtin a caller would naturally catch, so
``except FileNotFoundError`` still sees a directory without a license file.
"""

from pathlib import Path
from typing import Sequence


class LicenseError(Exception):
    """Base class for license detection errors."""


class UnrecognizedLicenseError(LicenseError, ValueError):
    """The text did not match any license in the catalog."""

    def __init__(self, source: str = "license text") -> None:
        self.source = source
        super().__init__(f"Unable to recognize license type of {source}")


class NoLicenseFileError(LicenseError, FileNotFoundError):
    """A directory holds no file that looks like a license file."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"No license file found in {directory}")


class MultipleLicenseFilesError(LicenseError):
    """A directory holds more than one file that looks like a license file.

    Attributes:
        directory: The directory that was searched.
        paths: Every candidate license file found, in search order.
    """

    def __init__(self, directory: Path, paths: Sequence[Path]) -> None:
        self.directory = directory
        self.paths = list(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Multiple license files found in {directory}: {names}")
