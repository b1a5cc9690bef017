"""Classification of license text against the catalog.

Matching happens in two passes over the catalog, both in declaration order:

1. Exact match: the normalized input equals an entry's normalized reference
   text.
2. Abbreviated match: one of an entry's patterns occurs verbatim
   (case-sensitive) in the raw input. This catches short references such
   as a bare license URL in a README-style notice.

The first hit wins. There is no fuzzy matching.
"""

import logging
from typing import Optional

from license_detector.catalog import CATALOG, LicenseEntry
from license_detector.errors import UnrecognizedLicenseError
from license_detector.normalize import normalize

logger = logging.getLogger(__name__)


def match_exact(text: str) -> Optional[LicenseEntry]:
    """Find the entry whose reference text equals ``text`` after normalization."""
    normalized = normalize(text)
    for entry in CATALOG:
        if entry.normalized_text == normalized:
            return entry
    return None


def match_abbreviated(text: str) -> Optional[LicenseEntry]:
    """Find the first entry with a pattern contained in the raw ``text``."""
    for entry in CATALOG:
        for pattern in entry.patterns:
            if pattern in text:
                logger.debug(f"Abbreviated match on {pattern!r}")
                return entry
    return None


def guess_type(text: str, source: str = "license text") -> str:
    """Determine the license type of a text.

    Args:
        text: Raw license text. It is not modified.
        source: Description of where the text came from, used in the error
            message (e.g., a file path).

    Returns:
        The catalog identifier of the matching license.

    Raises:
        UnrecognizedLicenseError: If neither an exact nor an abbreviated
            match is found.
    """
    entry = match_exact(text)
    if entry is not None:
        logger.debug(f"Exact match for {source}: {entry.spdx_id}")
        return entry.spdx_id

    entry = match_abbreviated(text)
    if entry is not None:
        logger.debug(f"Abbreviated match for {source}: {entry.spdx_id}")
        return entry.spdx_id

    logger.debug(f"No catalog entry matches {source}")
    raise UnrecognizedLicenseError(source)
