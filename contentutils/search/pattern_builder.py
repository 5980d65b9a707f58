"""
Fuzzy search pattern construction.

Turns user-entered queries into compiled regular expressions that match
sortified text. Words of the query must appear in order, separated by at
least one space, with a bounded number of extra characters allowed
between them to tolerate skipped words and punctuation.
"""

import re
from typing import Any, Optional

from ..core import get_config, get_logger
from .slugify import SORT_SEPARATOR, sortify

logger = get_logger(__name__)


DEFAULT_MAX_GAP = 20


def regexp_quote(s: str) -> str:
    """Escape a string so it matches literally inside a regular expression."""
    return re.escape(s)


def searchify(query: Any, prefix: bool = False, max_gap: int = DEFAULT_MAX_GAP) -> re.Pattern:
    """
    Turn a user-entered search query into a compiled regular expression.

    Args:
        query: Free-text query.
        prefix: Only match at the start of the candidate text.
        max_gap: Maximum number of extra characters between query words.

    Returns:
        Compiled pattern to apply to sortify()-normalized text. An empty
        query matches any text.
    """
    normalized = sortify(query)

    gap = f"{SORT_SEPARATOR}.{{0,{max_gap}}}?"
    pattern = normalized.replace(SORT_SEPARATOR, gap)

    if prefix:
        pattern = "^" + pattern

    return re.compile(pattern)


class SearchPatternBuilder:
    """
    Builds fuzzy search patterns with a configured gap bound.

    The builder is stateless apart from its settings and can be shared
    freely between threads.
    """

    def __init__(self, max_gap: int = DEFAULT_MAX_GAP, prefix: bool = False):
        """
        Initialize the builder.

        Args:
            max_gap: Maximum number of extra characters between query words.
            prefix: Default anchoring for built patterns.
        """
        self.max_gap = max_gap
        self.prefix = prefix

    @classmethod
    def from_config(cls) -> "SearchPatternBuilder":
        """Create a builder using the search section of config.json."""
        config = get_config()
        return cls(max_gap=config.search.max_gap, prefix=config.search.prefix)

    def build(self, query: Any, prefix: Optional[bool] = None) -> re.Pattern:
        """
        Compile a pattern for a query.

        Args:
            query: Free-text query.
            prefix: Override the builder's anchoring for this pattern.

        Returns:
            Compiled pattern.
        """
        if prefix is None:
            prefix = self.prefix

        pattern = searchify(query, prefix=prefix, max_gap=self.max_gap)
        logger.debug(f"Search pattern for {query!r}: {pattern.pattern!r}")

        return pattern

    def matches(self, pattern: re.Pattern, text: Any) -> bool:
        """
        Test raw text against a built pattern.

        The text is sortified first so it is compared in the same
        canonical form as the query.
        """
        return pattern.search(sortify(text)) is not None
