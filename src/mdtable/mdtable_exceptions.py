"""Custom exceptions for table rendering operations."""

from typing import Any


class TableError(Exception):
    """Base exception for table rendering operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TableParseError(TableError):
    """Raised when table text cannot be converted into a table model."""


class TableBindingError(TableError):
    """Raised when a binding is used after it has been cleared."""
