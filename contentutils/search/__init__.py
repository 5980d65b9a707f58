"""
Search module for sortable normalization and fuzzy query patterns.

Provides slug and sortify normalization plus compiled bounded-gap
patterns for autocomplete-style matching. Ranking and indexing are left
to the caller.
"""

from .slugify import slugify, sortify
from .pattern_builder import (
    DEFAULT_MAX_GAP,
    SearchPatternBuilder,
    regexp_quote,
    searchify
)

__all__ = [
    "slugify",
    "sortify",
    "DEFAULT_MAX_GAP",
    "SearchPatternBuilder",
    "regexp_quote",
    "searchify"
]
