"""
Exceptions raised by the Shipyard client.

Every error carries an ``ErrorKind`` so callers can branch on the
classification instead of parsing the message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of a failed API call."""
    TRANSPORT = "transport"
    UNAUTHORIZED = "unauthorized"
    UNEXPECTED_STATUS = "unexpected_status"
    CODEC = "codec"
    CONFIGURATION = "configuration"


class ShipyardError(Exception):
    """Base exception for all Shipyard client errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class TransportError(ShipyardError):
    """The HTTP request could not be completed (connection, DNS, timeout)."""

    kind = ErrorKind.TRANSPORT


class UnauthorizedError(ShipyardError):
    """The server answered 401 Unauthorized."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "unauthorized", details: Optional[str] = None):
        super().__init__(message, details)
        self.status_code = 401


class RequestError(ShipyardError):
    """
    The server answered with a status other than the one the operation expects.

    The message is the response body exactly as received.
    """

    kind = ErrorKind.UNEXPECTED_STATUS

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CodecError(ShipyardError):
    """A request body could not be encoded or a response body decoded."""

    kind = ErrorKind.CODEC

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message, details=str(original) if original else None)
        self.original = original


class ConfigurationError(ShipyardError):
    """The stored configuration is missing or unreadable."""

    kind = ErrorKind.CONFIGURATION
