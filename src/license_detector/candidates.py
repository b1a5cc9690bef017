"""File names that are expected to hold a project's license text."""

# Order matters: it is the order search results are reported in.
BASE_NAMES: tuple[str, ...] = ("LICENSE", "LICENCE", "COPYING", "COPYRIGHT")
EXTENSIONS: tuple[str, ...] = ("", ".txt", ".md", ".rst")

DEFAULT_LICENSE_FILES: tuple[str, ...] = tuple(
    f"{base}{ext}" for base in BASE_NAMES for ext in EXTENSIONS
)

_CANDIDATES_LOWER = frozenset(name.lower() for name in DEFAULT_LICENSE_FILES)


def is_candidate(filename: str) -> bool:
    """Check whether a file name looks like a license file.

    The comparison ignores case, so ``copying.RST`` is a candidate.

    Args:
        filename: Bare file name, without directory components.

    Returns:
        True if the name is one of DEFAULT_LICENSE_FILES, ignoring case.
    """
    return filename.lower() in _CANDIDATES_LOWER
