"""src/paylink/transport/tls.py

Pinned TLS configuration for Paylink.
"""

import ssl
from importlib import resources

from paylink.exceptions import TlsError

__all__ = ["DEFAULT_BUNDLE", "load_ca_bundle", "create_pinned_ssl_context"]

DEFAULT_BUNDLE = "ca_certificates.pem"


def load_ca_bundle(name: str = DEFAULT_BUNDLE) -> str:
    """
    Read a PEM certificate bundle shipped with the package.

    Args:
        name: File name under ``paylink/transport/certs``.

    Raises:
        TlsError: If the bundle is missing or unreadable.
    """
    try:
        return (resources.files(__package__) / "certs" / name).read_text("ascii")
    except (OSError, UnicodeDecodeError) as e:
        raise TlsError(f"failed to read certificate bundle {name!r}: {e}") from e


def create_pinned_ssl_context(cadata: str) -> ssl.SSLContext:
    """
    Creates a client SSL context trusting only the given certificates.

    System trust roots are not loaded. Hostname checking and certificate
    verification are enforced, with TLS 1.2 minimum.

    Args:
        cadata: PEM encoded CA certificates.

    Raises:
        TlsError: If no certificate could be loaded from ``cadata``.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    try:
        context.load_verify_locations(cadata=cadata)
    except (ssl.SSLError, ValueError, TypeError) as e:
        raise TlsError(f"failed to load domain certificates: {e}") from e

    if not context.get_ca_certs():
        raise TlsError("failed to load domain certificates: bundle is empty")
    return context
