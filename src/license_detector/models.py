"""Core data models for license_detector.

This module defines the license record produced by every loader and the
per-path result used by the command line and reporters.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from license_detector.catalog import LicenseEntry, get_entry, is_known
from license_detector.classifier import guess_type


@dataclass
class License:
    """A license and where it came from.

    The text is kept exactly as read. Normalization only ever happens on a
    temporary copy during classification.

    Attributes:
        spdx_id: License identifier (e.g., "MIT", "Apache-2.0"). Empty until
            guessed or supplied by the caller.
        text: Raw license text.
        file: Path the text was read from, or None if built from text.
    """

    spdx_id: str = ""
    text: str = ""
    file: Optional[Path] = None

    def guess_type(self) -> None:
        """Classify ``text`` and store the result in ``spdx_id``.

        Raises:
            UnrecognizedLicenseError: If the text matches no known license.
                ``spdx_id`` keeps its previous value.
        """
        source = str(self.file) if self.file else "license text"
        self.spdx_id = guess_type(self.text, source=source)

    @property
    def recognized(self) -> bool:
        """True if ``spdx_id`` names a license in the catalog.

        This is a lookup on the identifier only; the text is not consulted.
        """
        return bool(self.spdx_id) and is_known(self.spdx_id)

    @property
    def entry(self) -> Optional[LicenseEntry]:
        """Return the catalog entry for ``spdx_id``, if there is one."""
        return get_entry(self.spdx_id) if self.spdx_id else None


@dataclass
class DetectionResult:
    """Outcome of detecting the license of one file or directory.

    Attributes:
        source: The path that was inspected.
        license: The detected license, or None on failure.
        error: Error message if detection failed.
    """

    source: Path
    license: Optional[License] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Return True if a license was detected."""
        return self.license is not None and self.error is None
