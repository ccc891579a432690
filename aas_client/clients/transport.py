"""
HTTP transport abstraction.

The resource interfaces only depend on the HttpTransport protocol, so
transports can be wrapped (see TokenBasedTransport) or replaced in tests.
"""

import logging
import ssl
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class HttpTransport(Protocol):
    """Capabilities the client needs from an HTTP transport."""

    @property
    def cookies(self) -> httpx.Cookies: ...

    @property
    def timeout(self) -> httpx.Timeout: ...

    @property
    def follow_redirects(self) -> bool: ...

    @property
    def proxy(self) -> str | None: ...

    @property
    def verify(self) -> ssl.SSLContext | bool | str: ...

    @property
    def auth(self) -> httpx.Auth | None: ...

    @property
    def http_version(self) -> str: ...

    def send(self, request: httpx.Request) -> httpx.Response: ...

    async def send_async(self, request: httpx.Request) -> httpx.Response: ...

    def send_streaming(self, request: httpx.Request) -> httpx.Response: ...

    def close(self) -> None: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """
    Default transport backed by httpx.

    Synchronous sends go through an httpx.Client, asynchronous sends through
    an httpx.AsyncClient created on first use with the same configuration.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
        *,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        follow_redirects: bool = True,
        verify: ssl.SSLContext | bool | str = True,
        proxy: str | None = None,
        auth: httpx.Auth | None = None,
        http2: bool = False,
    ):
        self._verify = verify
        self._proxy = proxy
        self._http2 = http2
        self._client_kwargs: dict[str, Any] = {
            "timeout": timeout,
            "follow_redirects": follow_redirects,
            "verify": verify,
            "proxy": proxy,
            "auth": auth,
            "http2": http2,
        }
        self._client = client if client is not None else httpx.Client(**self._client_kwargs)
        self._async_client = async_client

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    @property
    def follow_redirects(self) -> bool:
        return self._client.follow_redirects

    @property
    def proxy(self) -> str | None:
        return self._proxy

    @property
    def verify(self) -> ssl.SSLContext | bool | str:
        return self._verify

    @property
    def auth(self) -> httpx.Auth | None:
        return self._client.auth

    @property
    def http_version(self) -> str:
        return "HTTP/2" if self._http2 else "HTTP/1.1"

    def _get_async_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._async_client is None or self._async_client.is_closed:
            self._async_client = httpx.AsyncClient(**self._client_kwargs)
        return self._async_client

    def send(self, request: httpx.Request) -> httpx.Response:
        logger.debug("Sending %s %s", request.method, request.url)
        return self._client.send(request)

    async def send_async(self, request: httpx.Request) -> httpx.Response:
        logger.debug("Sending %s %s (async)", request.method, request.url)
        client = self._get_async_client()
        return await client.send(request)

    def send_streaming(self, request: httpx.Request) -> httpx.Response:
        """Send without reading the body; the caller must close the response."""
        logger.debug("Sending %s %s (streaming)", request.method, request.url)
        return self._client.send(request, stream=True)

    def close(self) -> None:
        if not self._client.is_closed:
            self._client.close()

    async def aclose(self) -> None:
        self.close()
        if self._async_client is not None and not self._async_client.is_closed:
            await self._async_client.aclose()
            self._async_client = None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def new_default_transport(timeout: float = DEFAULT_TIMEOUT) -> HttpxTransport:
    """Create a transport with default settings."""
    return HttpxTransport(timeout=timeout)


def new_username_password_transport(
    username: str,
    password: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> HttpxTransport:
    """Create a transport using HTTP basic authentication."""
    return HttpxTransport(timeout=timeout, auth=httpx.BasicAuth(username, password))


def new_trust_all_certificates_transport(timeout: float = DEFAULT_TIMEOUT) -> HttpxTransport:
    """
    Create a transport that skips TLS certificate verification.

    Only meant for development setups with self-signed certificates.
    """
    logger.warning("TLS certificate verification is disabled")
    return HttpxTransport(timeout=timeout, verify=False)
