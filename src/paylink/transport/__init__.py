"""src/paylink/transport/__init__.py

Transport layer module for Paylink.

This module pins the client to the certificate bundle shipped with the
package and exposes the process-wide shared transport.
"""

from .bootstrap import default_transport
from .connection import Transport
from .tls import create_pinned_ssl_context, load_ca_bundle

__all__ = [
    "Transport",
    "default_transport",
    "create_pinned_ssl_context",
    "load_ca_bundle",
]
