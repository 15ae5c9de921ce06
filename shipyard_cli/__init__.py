"""
Shipyard CLI - Command-line tool and client library for the Shipyard
cluster management API.
"""

__version__ = "0.1.0"
__author__ = "Shipyard Project"

from .exceptions import (  # noqa: E402
    ErrorKind,
    ShipyardError,
    TransportError,
    UnauthorizedError,
    RequestError,
    CodecError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "ErrorKind",
    "ShipyardError",
    "TransportError",
    "UnauthorizedError",
    "RequestError",
    "CodecError",
    "ConfigurationError",
]
