"""
Slug generation and sortable text normalization.

Slugs keep Unicode letters and digits, lowercased and NFC-composed, with
every run of anything else collapsed into a single separator. Combining
marks that do not compose (the dot of a lowercased "İ") are dropped.
"""

import unicodedata
from typing import Any, Optional


DEFAULT_SEPARATOR = "-"
SORT_SEPARATOR = " "

# Unicode general categories kept verbatim: letters and numbers
_KEPT_CATEGORIES = ("L", "N")

# Combining marks left over after composition are dropped without a separator
_DROPPED_CATEGORY = "M"


def slugify(s: Any, separator: str = DEFAULT_SEPARATOR, allow: Optional[str] = None) -> str:
    """
    Turn a string into a slug.

    Args:
        s: Text to convert. None becomes "", other values are stringified.
        separator: String placed between words.
        allow: One punctuation character that may appear in the slug.

    Returns:
        Lowercase slug without leading or trailing separators.
    """
    if s is None:
        return ""
    if not isinstance(s, str):
        s = str(s)

    chars = []
    pending_separator = False

    for char in unicodedata.normalize("NFC", s.lower()):
        category = unicodedata.category(char)[0]
        if category == _DROPPED_CATEGORY and char != allow:
            continue
        if char == allow or category in _KEPT_CATEGORIES:
            if pending_separator and chars:
                chars.append(separator)
            pending_separator = False
            chars.append(char)
        else:
            pending_separator = True

    return "".join(chars)


def sortify(s: Any) -> str:
    """
    Normalize text into a lowercase, punctuation-tolerant, space-separated form.

    Used for sortable properties such as a sort title, where case and
    punctuation differences should not matter, and as the canonical
    form fuzzy search patterns are matched against.

    Args:
        s: Text to normalize.

    Returns:
        Normalized text. sortify(sortify(s)) == sortify(s).
    """
    return slugify(s, separator=SORT_SEPARATOR)
