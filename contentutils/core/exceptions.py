"""
Custom exception hierarchy for the content utilities.

The text, search and pruning helpers are total and never raise their own
errors; these types cover configuration loading and document storage.
"""


class ContentUtilsError(Exception):
    """Base exception for all content utility errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ContentUtilsError):
    """Raised when configuration is invalid or missing."""
    pass


class DocumentError(ContentUtilsError):
    """Raised when a stored document cannot be read or written."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        """
        Initialize document error.

        Args:
            message: Error description.
            path: Path to the problematic document file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.path = path
