"""
Custom Exceptions Module.

The extraction engine itself never raises: a field it cannot find is
simply absent from the result. These exceptions belong to the surfaces
around it (loading OCR dumps from disk, configuration, locale lookup).

Exception Hierarchy:
    BillScanError (base)
    ├── InputError
    │   ├── DocumentNotFoundError
    │   ├── UnsupportedFileTypeError
    │   └── CorruptedFileError
    └── ConfigurationError
        └── UnknownLocaleError
"""


class BillScanError(Exception):
    """
    Base exception for all billscan errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(BillScanError):
    """Base exception for input handling errors."""
    pass


class DocumentNotFoundError(InputError):
    """Raised when an OCR dump cannot be found."""

    def __init__(self, filepath: str):
        message = f"File not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


class UnsupportedFileTypeError(InputError):
    """
    Raised when an unsupported file type is provided.

    Example:
        >>> raise UnsupportedFileTypeError(".pdf", [".txt", ".json"])
    """

    def __init__(self, file_type: str, supported_types: list):
        message = f"Unsupported file type: '{file_type}'"
        details = {"file_type": file_type, "supported_types": supported_types}
        super().__init__(message, details)


class CorruptedFileError(InputError):
    """Raised when an OCR dump is unreadable or has an unexpected shape."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Corrupted or unreadable file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(BillScanError):
    """Raised when configuration cannot be loaded or is inconsistent."""
    pass


class UnknownLocaleError(ConfigurationError):
    """Raised when an extraction locale is requested that is not registered."""

    def __init__(self, name: str, available: list):
        message = f"Unknown extraction locale: '{name}'"
        details = {"locale": name, "available": available}
        super().__init__(message, details)


__all__ = [
    'BillScanError',
    'InputError',
    'DocumentNotFoundError',
    'UnsupportedFileTypeError',
    'CorruptedFileError',
    'ConfigurationError',
    'UnknownLocaleError',
]
