"""src/paylink/__init__.py

Paylink - marshalling and transport core of a payment gateway API client.

Paylink turns request records, plain dataclasses, into URL-encoded query
parameters and provides a TLS transport pinned to the certificate bundle
shipped with the package.

Key Features:
    - Dataclass records mapped to ``application/x-www-form-urlencoded`` data
    - Field naming through ``query`` / ``json`` metadata, ``sendzero`` option
    - Nested records as ``parent[field]``, inline records without prefix
    - ``Dict[str, str]`` fields as ``field[key]`` entries
    - Shared transport trusting only the embedded CA bundle

Example:
    Mapping a request record::

        from dataclasses import dataclass, field
        from typing import Dict, Optional

        from paylink import map_query_params, query_field

        @dataclass
        class Card:
            name: str = ""
            number: str = ""

        @dataclass
        class CreateCharge:
            amount: int = query_field("amount,sendzero", default=0)
            currency: str = "thb"
            card: Optional[Card] = None
            metadata: Dict[str, str] = field(default_factory=dict)

        params = map_query_params(
            CreateCharge(amount=10000, card=Card(name="John"), metadata={"order": "42"})
        )
        params.encode()
        # 'amount=10000&currency=thb&card%5Bname%5D=John&metadata%5Border%5D=42'

    Opening a pinned connection::

        from paylink import default_transport

        sock = default_transport().connect("api.example.com")
"""

from paylink.exceptions import MappingError, PaylinkError, TlsError
from paylink.http.fields import Float32, UInt, query_field
from paylink.http.marshal import encode_query_params, map_query_params
from paylink.http.query import QueryParams
from paylink.transport import Transport, default_transport
from paylink.version import __version__

__all__ = [
    "map_query_params",
    "encode_query_params",
    "query_field",
    "QueryParams",
    "UInt",
    "Float32",
    "Transport",
    "default_transport",
    "PaylinkError",
    "MappingError",
    "TlsError",
]
