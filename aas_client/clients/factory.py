"""
Transport construction from client settings.
"""

import logging
from functools import lru_cache

import httpx

from aas_client.clients.token_based import TokenBasedTransport, bearer_token_supplier
from aas_client.clients.transport import HttpTransport, HttpxTransport
from aas_client.config import ClientSettings, get_settings

logger = logging.getLogger(__name__)


def create_transport(settings: ClientSettings | None = None) -> HttpTransport:
    """
    Create a transport matching the given settings.

    Basic authentication is configured on the underlying httpx client; a
    bearer token wraps the transport in a TokenBasedTransport.
    """
    settings = settings or get_settings()

    auth = None
    if settings.username is not None:
        auth = httpx.BasicAuth(settings.username, settings.password or "")

    if settings.trust_all_certificates:
        logger.warning("TLS certificate verification is disabled")

    transport: HttpTransport = HttpxTransport(
        timeout=settings.timeout_seconds,
        follow_redirects=settings.follow_redirects,
        verify=not settings.trust_all_certificates,
        proxy=settings.proxy,
        auth=auth,
    )
    if settings.bearer_token is not None:
        transport = TokenBasedTransport(transport, bearer_token_supplier(settings.bearer_token))
    return transport


@lru_cache
def get_transport() -> HttpTransport:
    """Get cached transport built from the environment settings."""
    return create_transport(get_settings())
