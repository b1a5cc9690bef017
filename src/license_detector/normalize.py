"""Text canonicalization applied before comparing license texts.

License files circulate with different line wrapping, capitalization and
punctuation. None of those change the terms of the license, so texts are
compared in a normalized form. The raw text is never modified; callers
normalize a copy only for comparison.
"""

import re

# Runs of whitespace that can differ between copies of the same license
_WHITESPACE_PATTERN = re.compile(r"[\r\n\t ]+")


def normalize(text: str) -> str:
    """Canonicalize license text for comparison.

    Steps, in order:
    1. Lowercase everything.
    2. Remove commas.
    3. Collapse each run of CR, LF, tab and space characters to one space.
    4. Strip leading and trailing whitespace.

    Commas are removed before whitespace is collapsed so that the function
    is idempotent: ``normalize(normalize(x)) == normalize(x)``.

    Args:
        text: Raw license text.

    Returns:
        The normalized text.

    Example:
        >>> normalize("Hello,\\r\\n  World")
        'hello world'
    """
    text = text.lower().replace(",", "")
    text = _WHITESPACE_PATTERN.sub(" ", text)
    return text.strip()
