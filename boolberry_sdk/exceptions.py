"""
Exceptions for the Boolberry SDK.

Every client operation either returns its typed result or raises one of
the errors defined here.
"""
from typing import Optional


class BoolberryError(Exception):
    """Base exception for all Boolberry SDK errors."""
    pass


class TransportError(BoolberryError):
    """Raised when the HTTP request itself fails (connection, timeout, HTTP status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RequestTimeoutError(TransportError):
    """Raised when the daemon or wallet does not answer within the configured timeout."""
    pass


class EncodeError(BoolberryError):
    """Raised when an outgoing request cannot be serialized."""
    pass


class DecodeError(BoolberryError):
    """Raised when a response body is not JSON or does not have the expected shape."""
    pass


class RPCError(BoolberryError):
    """
    Raised when a JSON-RPC response carries a non-zero error code.

    ``str(err)`` is the message reported by the remote service, unchanged.
    """

    def __init__(self, message: str, code: int):
        self.code = code
        self.message = message
        super().__init__(message)


class StatusError(BoolberryError):
    """Raised when a plain GET endpoint reports a status other than ``OK``."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(status)
