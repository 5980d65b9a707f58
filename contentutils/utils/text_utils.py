"""
Text utility functions for the content utilities.

Provides word-boundary-aware truncation of plaintext plus the small
string conversions (global replace, capitalization, css and camelCase
names, trailing slashes) used across the platform.
"""

import re
import string
from typing import Any


DEFAULT_ELLIPSIS = "..."

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)

# Trailing token plus the whitespace before it
_TRAILING_TOKEN = re.compile(r"\s*\S+\Z")


def _is_word_char(char: str) -> bool:
    """A character belongs to a word only if it has distinct upper and lower case."""
    return char.lower() != char.upper()


def _coerce_length(value: Any) -> int:
    """Convert a length bound to a non-negative int, falling back to 0."""
    try:
        length = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(length, 0)


def truncate_plaintext(text: Any, max_chars: Any, ellipsis: Any = DEFAULT_ELLIPSIS) -> str:
    """
    Truncate plaintext at a word boundary and append an ellipsis.

    The text is cut to at most max_chars characters without breaking a
    word when possible. If adding the ellipsis would not actually shorten
    the text, the original text is returned.

    Args:
        text: Text to truncate. None becomes "", other values are stringified.
        max_chars: Character budget. Invalid or negative values become 0.
        ellipsis: String appended after the cut. None means "...".

    Returns:
        Truncated text, never longer than the original.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    max_chars = _coerce_length(max_chars)
    ellipsis = DEFAULT_ELLIPSIS if ellipsis is None else str(ellipsis)

    if len(text) <= max_chars:
        return text

    # One character past the budget shows whether the cut splits a word
    kept = text[:max_chars + 1]

    if len(kept) >= 2 and _is_word_char(kept[-1]) and _is_word_char(kept[-2]):
        # The cut lands inside a word: drop it and the whitespace before it
        kept = _TRAILING_TOKEN.sub("", kept)
    else:
        kept = kept[:-1].rstrip()

    if len(kept) + len(ellipsis) > len(text):
        return text

    return kept + ellipsis


def global_replace(haystack: str, needle: str, replacement: str) -> str:
    """
    Replace every occurrence of needle in haystack.

    An empty needle leaves the haystack unchanged.
    """
    if not needle:
        return haystack
    return haystack.replace(needle, replacement)


def capitalize_first(s: str) -> str:
    """Capitalize the first letter of a string, leaving the rest untouched."""
    return s[:1].upper() + s[1:]


def css_name(name: str) -> str:
    """
    Convert underscore, space or camelCase names to a hyphenated css-style name.

    Only ASCII letters and digits survive. Any other character, and any
    uppercase letter after the first, starts a new segment.

    Args:
        name: Name such as "backgroundColor" or "my_widget".

    Returns:
        Lowercase hyphenated name, e.g. "background-color".
    """
    css = []
    dash = False

    for i, char in enumerate(name):
        if char not in _ASCII_ALNUM:
            dash = True
            continue

        if char in string.ascii_uppercase:
            if i > 0:
                dash = True
            char = char.lower()

        if dash and css:
            css.append("-")
        dash = False
        css.append(char)

    return "".join(css)


def camel_name(s: str) -> str:
    """
    Convert a name to camelCase.

    Useful for turning CSV headings into sensible property names. Only
    ASCII letters and digits remain. Anything else uppercases the next
    character; existing uppercase letters (except the first character)
    are preserved so camelCase input stays camelCase.

    Args:
        s: Friendly name such as "Date of Birth".

    Returns:
        camelCase name, e.g. "dateOfBirth".
    """
    result = []
    next_up = False

    for i, char in enumerate(s):
        if i > 0 and char in string.ascii_uppercase:
            next_up = True

        if char in _ASCII_ALNUM:
            if next_up:
                result.append(char.upper())
                next_up = False
            else:
                result.append(char.lower())
        else:
            next_up = True

    return "".join(result)


def add_slash_if_needed(path: str) -> str:
    """Add a trailing slash to a path unless it already ends in one."""
    if path.endswith("/"):
        return path
    return path + "/"
