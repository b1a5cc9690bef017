"""Catalog of known license types.

Each entry pairs a license identifier with the canonical reference text of
the license and a short list of abbreviated-match patterns. A pattern is a
string, usually the license's canonical URL, whose presence in a file is
enough on its own to identify the license.

Reference texts live in ``license_detector/data/<identifier>.txt`` and are
loaded once at import time. The catalog is immutable afterwards.
"""

from dataclasses import dataclass, field
from importlib.resources import files
from typing import Optional

from license_detector.normalize import normalize


@dataclass(frozen=True)
class LicenseEntry:
    """A known license type.

    Attributes:
        spdx_id: SPDX identifier (e.g., "MIT", "Apache-2.0").
        name: Human-readable license name.
        text: Canonical reference text, exactly as distributed.
        patterns: Case-sensitive substrings that identify the license on
            their own when found in raw text.
        normalized_text: ``normalize(text)``, computed once.
    """

    spdx_id: str
    name: str
    text: str
    patterns: tuple[str, ...] = ()
    normalized_text: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "normalized_text", normalize(self.text))


def _load_text(spdx_id: str) -> str:
    return (
        files("license_detector.data")
        .joinpath(f"{spdx_id}.txt")
        .read_text(encoding="utf-8")
    )


# Declaration order is evaluation order: the first match wins.
_DEFINITIONS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("MIT", "MIT License", ()),
    ("BSD-2-Clause", 'BSD 2-Clause "Simplified" License', ()),
    ("BSD-3-Clause", 'BSD 3-Clause "New" or "Revised" License', ()),
    ("ISC", "ISC License", ()),
    (
        "Apache-2.0",
        "Apache License 2.0",
        (
            "http://www.apache.org/licenses/LICENSE-2.0",
            "https://www.apache.org/licenses/LICENSE-2.0",
        ),
    ),
    (
        "MPL-2.0",
        "Mozilla Public License 2.0",
        ("http://mozilla.org/MPL/2.0/", "https://mozilla.org/MPL/2.0/"),
    ),
    (
        "LGPL-2.1",
        "GNU Lesser General Public License v2.1",
        ("gnu.org/licenses/old-licenses/lgpl-2.1",),
    ),
    (
        "LGPL-3.0",
        "GNU Lesser General Public License v3.0",
        ("gnu.org/licenses/lgpl-3.0",),
    ),
    (
        "GPL-2.0",
        "GNU General Public License v2.0",
        ("gnu.org/licenses/old-licenses/gpl-2.0",),
    ),
    (
        "GPL-3.0",
        "GNU General Public License v3.0",
        ("gnu.org/licenses/gpl-3.0",),
    ),
    (
        "AGPL-3.0",
        "GNU Affero General Public License v3.0",
        ("gnu.org/licenses/agpl-3.0",),
    ),
    (
        "Unlicense",
        "The Unlicense",
        ("http://unlicense.org", "https://unlicense.org"),
    ),
)

CATALOG: tuple[LicenseEntry, ...] = tuple(
    LicenseEntry(
        spdx_id=spdx_id,
        name=name,
        text=_load_text(spdx_id),
        patterns=patterns,
    )
    for spdx_id, name, patterns in _DEFINITIONS
)

KNOWN_LICENSES: tuple[str, ...] = tuple(entry.spdx_id for entry in CATALOG)

_BY_ID: dict[str, LicenseEntry] = {entry.spdx_id: entry for entry in CATALOG}


def get_entry(spdx_id: str) -> Optional[LicenseEntry]:
    """Look up a catalog entry by identifier.

    Args:
        spdx_id: License identifier. Matching is exact and case-sensitive.

    Returns:
        The LicenseEntry, or None if the identifier is not in the catalog.
    """
    return _BY_ID.get(spdx_id)


def is_known(spdx_id: str) -> bool:
    """Return True if the identifier names a license in the catalog."""
    return spdx_id in _BY_ID
