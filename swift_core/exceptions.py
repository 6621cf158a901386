"""
Swift Client Exceptions
=======================
Exception hierarchy for the object storage client.
"""

from typing import Optional


class SwiftError(Exception):
    """Base exception for all object storage client errors."""
    def __init__(self, message: str = "", status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class OptionError(SwiftError):
    """Raised when a construction option is missing or invalid."""
    pass


class EmptyNameError(SwiftError):
    """Raised when a container or object name is empty."""
    def __init__(self, message: str = "container and object names must not be empty"):
        super().__init__(message)


class TempUrlKeyMissing(SwiftError):
    """Raised when a temporary URL is requested without a temp_url_key."""
    def __init__(self, message: str = "temp_url_key is not configured"):
        super().__init__(message)


class AuthenticationError(SwiftError):
    """Raised when the auth endpoint rejects the credentials."""

    def __init__(self, code: int, message: str):
        super().__init__(message, status_code=code)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ResponseError(SwiftError):
    """Raised when a storage request ends with a non-2xx status."""

    def __init__(self, code: int, message: str):
        super().__init__(message, status_code=code)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code} {self.message}"
