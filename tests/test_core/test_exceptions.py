"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from contentutils.core.exceptions import (
    ContentUtilsError,
    ConfigurationError,
    DocumentError
)


class TestContentUtilsError:
    """Tests for base ContentUtilsError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = ContentUtilsError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = ContentUtilsError("Bad value", {"key": "title", "depth": 2})

        assert error.details["key"] == "title"
        assert error.details["depth"] == 2


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_can_be_caught_as_base(self):
        """Test that ConfigurationError can be caught as ContentUtilsError."""
        with pytest.raises(ContentUtilsError):
            raise ConfigurationError("Test error")


class TestDocumentError:
    """Tests for DocumentError."""

    def test_with_path(self):
        """Test DocumentError with path parameter."""
        error = DocumentError("Unreadable document", path="/docs/page.json")

        assert error.path == "/docs/page.json"
        assert error.message == "Unreadable document"
        assert isinstance(error, ContentUtilsError)

    def test_with_path_and_details(self):
        """Test DocumentError with path and details."""
        error = DocumentError(
            "Invalid JSON",
            path="/docs/page.json",
            details={"line": 3}
        )

        assert error.details["line"] == 3
