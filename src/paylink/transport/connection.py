"""src/paylink/transport/connection.py

Shared TLS transport pinned to the Paylink trust bundle.
"""

import logging
import socket
import ssl
from dataclasses import dataclass, field
from typing import Union

from paylink.exceptions import ConnectTimeout, NetworkError, TlsError
from paylink.transport.tls import (
    DEFAULT_BUNDLE,
    create_pinned_ssl_context,
    load_ca_bundle,
)
from paylink.utils.timing import Timeout

__all__ = ["Transport"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transport:
    """
    Immutable TLS transport trusting only a pinned certificate bundle.

    Attributes:
        ssl_context: Context used to wrap every connection.
        timeout: Connect and read timeouts applied to new connections.
    """

    ssl_context: ssl.SSLContext
    timeout: Timeout = field(default_factory=Timeout)

    @classmethod
    def from_bundle(
        cls,
        name: str = DEFAULT_BUNDLE,
        timeout: Union[float, Timeout, None] = None,
    ) -> "Transport":
        """
        Build a transport from a certificate bundle shipped with the package.

        Raises:
            TlsError: If the bundle is missing or holds no certificate.
        """
        cadata = load_ca_bundle(name)
        if not isinstance(timeout, Timeout):
            timeout = Timeout.from_float(timeout)
        return cls(create_pinned_ssl_context(cadata), timeout)

    def connect(self, host: str, port: int = 443) -> ssl.SSLSocket:
        """
        Open a TCP connection and wrap it with the pinned context.

        Raises:
            ConnectTimeout: If connecting or the handshake times out.
            TlsError: If certificate verification fails.
            NetworkError: On any other socket error.
        """
        try:
            raw_sock = socket.create_connection(
                (host, port), timeout=self.timeout.connect
            )
        except socket.timeout as e:
            raise ConnectTimeout(f"Timeout connecting to {host}:{port}") from e
        except OSError as e:
            raise NetworkError(f"Connection error to {host}:{port} - {e}") from e

        try:
            sock = self.ssl_context.wrap_socket(raw_sock, server_hostname=host)
        except socket.timeout as e:
            raw_sock.close()
            raise ConnectTimeout(f"Timeout during TLS handshake: {e}") from e
        except ssl.SSLError as e:
            raw_sock.close()
            raise TlsError(f"TLS Verification Error: {e}") from e
        except OSError as e:
            raw_sock.close()
            raise NetworkError(f"Connection error to {host}:{port} - {e}") from e

        # After the handshake, switch to the read timeout
        sock.settimeout(self.timeout.read)
        logger.debug("Opened pinned TLS connection to %s:%d", host, port)
        return sock
