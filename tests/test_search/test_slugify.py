"""
Tests for slug generation and sortify normalization.
"""

import pytest

from contentutils.search.slugify import slugify, sortify


class TestSlugify:
    """Tests for slugify function."""

    def test_basic_slug(self):
        """Test lowercase hyphenated output."""
        assert slugify("Hello World!") == "hello-world"

    def test_collapses_and_trims_separators(self):
        """Test that punctuation runs collapse and edges are trimmed."""
        assert slugify("--Hello,   brave   new -- world!!") == "hello-brave-new-world"

    def test_custom_separator(self):
        assert slugify("Hello World", separator="_") == "hello_world"

    def test_allowed_punctuation(self):
        """Test that one punctuation character may be kept."""
        assert slugify("docs/Getting Started", allow="/") == "docs/getting-started"

    def test_unicode_letters_kept(self):
        """Test that non-ASCII letters survive lowercased."""
        assert slugify("Sécurité Aérienne") == "sécurité-aérienne"

    def test_digits_kept(self):
        assert slugify("Route 66") == "route-66"

    def test_none_and_non_strings(self):
        """Test that None becomes empty and numbers are stringified."""
        assert slugify(None) == ""
        assert slugify(2024) == "2024"

    def test_only_punctuation(self):
        assert slugify("?!...") == ""

    def test_decomposed_accents_composed(self):
        """Test that a base letter plus combining accent becomes one letter."""
        assert slugify("Cafe\u0301 Cre\u0300me") == "caf\u00e9-cr\u00e8me"

    def test_leftover_combining_marks_dropped(self):
        """Test that marks with no composed form vanish without splitting the word."""
        assert slugify("\u0130stanbul") == "istanbul"
        assert slugify("a\u20ddb") == "ab"


class TestSortify:
    """Tests for sortify function."""

    def test_space_separated_lowercase(self):
        """Test that sortify uses spaces instead of hyphens."""
        assert sortify("The Quick, Brown FOX!") == "the quick brown fox"

    def test_dotted_capital_i(self):
        """Test that the Turkish dotted capital I sorts like a plain i."""
        assert sortify("\u0130stanbul") == "istanbul"
        assert sortify("\u0130stanbul") == sortify("Istanbul")

    def test_punctuation_differences_ignored(self):
        """Test that differently punctuated titles compare equal."""
        assert sortify("Hello -- World") == sortify("hello world")

    @pytest.mark.parametrize("text", [
        "Mixed CASE Title",
        "  Leading and trailing  ",
        "Punctuation: galore; (really)!",
        "Règlement (EU) 2024/123",
        "İstanbul Straße",
        "",
    ])
    def test_idempotent(self, text):
        """Test that sortify(sortify(s)) == sortify(s)."""
        once = sortify(text)

        assert sortify(once) == once
