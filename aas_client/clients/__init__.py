"""
HTTP transports for the AAS client.

- HttpxTransport: default transport backed by httpx
- TokenBasedTransport: decorator adding an Authorization header per request
"""

from aas_client.clients.factory import create_transport, get_transport
from aas_client.clients.token_based import TokenBasedTransport, bearer_token_supplier
from aas_client.clients.transport import (
    HttpTransport,
    HttpxTransport,
    new_default_transport,
    new_trust_all_certificates_transport,
    new_username_password_transport,
)

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "TokenBasedTransport",
    "bearer_token_supplier",
    "create_transport",
    "get_transport",
    "new_default_transport",
    "new_trust_all_certificates_transport",
    "new_username_password_transport",
]
