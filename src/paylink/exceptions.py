"""src/paylink/exceptions.py

Paylink Exceptions hierarchy.
"""

# pylint: disable=redefined-builtin

from typing import Optional


class PaylinkError(Exception):
    """Base exception for all Paylink errors."""


class MappingError(PaylinkError):
    """
    A record field could not be mapped to query parameters.

    Attributes:
        field_name: Name of the offending dataclass field.
        reason: Human readable reason.
        record: Name of the record type declaring the field, if known.
    """

    def __init__(self, field_name: str, reason: str, record: Optional[str] = None):
        self.field_name = field_name
        self.reason = reason
        self.record = record
        super().__init__(f"cannot map field `{field_name}`, {reason}")


class TransportError(PaylinkError):
    """General exception for transport errors."""


class NetworkError(TransportError):
    """
    Base exception for network-related errors.
    Wraps socket errors and other connection issues.
    """


class TlsError(NetworkError):
    """TLS trust bundle, handshake or verification errors."""


class TimeoutError(TransportError):
    """
    Base exception for timeouts.
    """

    def __init__(self, message: str = "Operation timed out"):
        super().__init__(message)


class ConnectTimeout(TimeoutError):
    """Timeout during connection establishment."""
