"""
Custom exceptions for better error handling.

Business rule violations are not exceptions; see core.validation.
"""
from typing import Any, Dict, Optional


class BankedBumsException(Exception):
    """Base exception for all transaction processing errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FileProcessingError(BankedBumsException):
    """Raised when the input source cannot be opened or read."""
    pass


class DataNotFoundError(FileProcessingError):
    """Raised when the input file does not exist."""
    pass


class ParsingError(BankedBumsException):
    """Raised when a line is not a well-formed transaction record."""
    pass


class ExportError(BankedBumsException):
    """Raised when Excel export fails."""
    pass


class ConfigurationError(BankedBumsException):
    """Raised when configuration is invalid."""
    pass
