"""Exceptions raised by the Beeswax client."""

from typing import Any


class BeeswaxError(Exception):
    """Base class for all Beeswax client errors."""


class BeeswaxAPIError(BeeswaxError):
    """Exception raised for Beeswax API errors."""

    def __init__(self, message: str, status_code: int | None = None, response_body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class BeeswaxAuthenticationError(BeeswaxAPIError):
    """Raised when Buzz rejects the credentials or the session cookie."""


class BeeswaxConfigurationError(BeeswaxError):
    """Raised when the connection configuration is missing or invalid."""


class UnsupportedOperationError(BeeswaxError):
    """Raised when a resource does not support the requested verb."""
