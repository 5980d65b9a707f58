"""
Content Utilities Package.

Helper library for a content platform: word-boundary-aware truncation,
bounded-gap fuzzy search patterns, and recursive pruning of temporary
properties from document trees, plus the small string, HTML and id
helpers the rest of the platform relies on.
"""

__version__ = "1.0.0"
