"""utils/timing.py

Transport timeouts configuration.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Timeout:
    """
    Timeout configuration for pinned connections.

    Attributes:
        connect: Seconds to wait for the TCP connect and TLS handshake.
        read: Seconds to wait on each socket read once connected.
    """

    connect: Optional[float] = None
    read: Optional[float] = None

    @classmethod
    def from_float(cls, timeout: Optional[float]) -> "Timeout":
        """Create a Timeout using the same value for every phase."""
        if timeout is None:
            return cls()
        return cls(connect=timeout, read=timeout)
