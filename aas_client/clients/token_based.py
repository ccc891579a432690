"""
Transport decorator injecting an Authorization header into every request.

The header value comes from a supplier that is called once per request, so
suppliers returning a refreshed token are picked up without rebuilding the
transport.
"""

import logging
import ssl
from collections.abc import Callable

import httpx

from aas_client.clients.transport import HttpTransport

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"

AuthSupplier = Callable[[], str | None]


class TokenBasedTransport:
    """
    HttpTransport wrapping another transport and adding authentication.

    All configuration accessors are forwarded to the wrapped transport. The
    send paths send a decorated copy of the request, the caller's request
    object is left untouched.
    """

    def __init__(self, transport: HttpTransport, auth_supplier: AuthSupplier):
        self._impl = transport
        self._auth_supplier = auth_supplier

    @property
    def cookies(self) -> httpx.Cookies:
        return self._impl.cookies

    @property
    def timeout(self) -> httpx.Timeout:
        return self._impl.timeout

    @property
    def follow_redirects(self) -> bool:
        return self._impl.follow_redirects

    @property
    def proxy(self) -> str | None:
        return self._impl.proxy

    @property
    def verify(self) -> ssl.SSLContext | bool | str:
        return self._impl.verify

    @property
    def auth(self) -> httpx.Auth | None:
        return self._impl.auth

    @property
    def http_version(self) -> str:
        return self._impl.http_version

    def send(self, request: httpx.Request) -> httpx.Response:
        return self._impl.send(self.decorate(request))

    async def send_async(self, request: httpx.Request) -> httpx.Response:
        return await self._impl.send_async(self.decorate(request))

    def send_streaming(self, request: httpx.Request) -> httpx.Response:
        return self._impl.send_streaming(self.decorate(request))

    def close(self) -> None:
        self._impl.close()

    async def aclose(self) -> None:
        await self._impl.aclose()

    def __enter__(self) -> "TokenBasedTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def decorate(self, request: httpx.Request) -> httpx.Request:
        """
        Copy a request and set the Authorization header on the copy.

        Method, URL, headers, body and extensions (e.g. timeout) are carried
        over. If the supplier returns None the copy has exactly the headers
        of the original.
        """
        headers = httpx.Headers(request.headers)
        auth = self._auth_supplier()
        if auth is not None:
            headers[AUTHORIZATION] = auth
        else:
            logger.debug("No credentials available, sending %s %s unauthenticated", request.method, request.url)

        decorated = httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=dict(request.extensions),
        )
        if isinstance(request.stream, httpx.ByteStream):
            decorated.read()
        return decorated


def bearer_token_supplier(token: str) -> AuthSupplier:
    """Supplier for a static bearer token."""
    header = f"Bearer {token}"
    return lambda: header
