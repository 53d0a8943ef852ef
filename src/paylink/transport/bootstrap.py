"""src/paylink/transport/bootstrap.py

Process-wide transport, built once from the embedded trust bundle.
"""

import logging
import threading
from typing import Optional

from paylink.transport.connection import Transport

__all__ = ["default_transport"]

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_transport: Optional[Transport] = None


def default_transport() -> Transport:
    """
    Return the shared transport, building it on first use.

    A client cannot run without a verifiable trust root, so a broken
    bundle is not recovered from: the TlsError propagates to the caller
    and the next call tries again and fails the same way.

    Raises:
        TlsError: If the embedded bundle is missing or unparsable.
    """
    global _transport  # pylint: disable=global-statement

    if _transport is not None:
        return _transport

    with _lock:
        if _transport is None:
            transport = Transport.from_bundle()
            logger.info(
                "Loaded %d pinned CA certificates",
                len(transport.ssl_context.get_ca_certs()),
            )
            _transport = transport
    return _transport
