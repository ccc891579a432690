"""
Tests for the authenticating transport decorator.
"""

import httpx
import pytest

from aas_client.clients import HttpxTransport, TokenBasedTransport, bearer_token_supplier

URI = "http://localhost/api/v3.0/shells"


class Recorder:
    """Mock transport handler remembering the requests it received."""

    def __init__(self):
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json={"result": []})


def _transport(recorder: Recorder) -> HttpxTransport:
    mock = httpx.MockTransport(recorder)
    return HttpxTransport(
        client=httpx.Client(transport=mock),
        async_client=httpx.AsyncClient(transport=mock),
    )


class TestDecorate:
    """Tests for the decorated request copy."""

    def test_adds_authorization_header(self):
        """Test the copy has exactly one header more than the original."""
        transport = TokenBasedTransport(_transport(Recorder()), lambda: "Bearer abc")
        request = httpx.Request("GET", URI, headers={"X-Trace": "1"})

        decorated = transport.decorate(request)

        assert decorated.headers["Authorization"] == "Bearer abc"
        assert len(decorated.headers) == len(request.headers) + 1

    def test_original_request_unchanged(self):
        """Test the caller's request is not mutated."""
        transport = TokenBasedTransport(_transport(Recorder()), lambda: "Bearer abc")
        request = httpx.Request("GET", URI)

        transport.decorate(request)

        assert "Authorization" not in request.headers

    def test_none_supplier_keeps_headers(self):
        """Test a None credential leaves the headers untouched."""
        transport = TokenBasedTransport(_transport(Recorder()), lambda: None)
        request = httpx.Request("GET", URI, headers={"X-Trace": "1"})

        decorated = transport.decorate(request)

        assert decorated.headers == request.headers
        assert "Authorization" not in decorated.headers

    def test_preserves_method_url_body_and_extensions(self):
        """Test method, URL, body and extensions are carried over."""
        transport = TokenBasedTransport(_transport(Recorder()), lambda: "Bearer abc")
        timeout = httpx.Timeout(5.0).as_dict()
        request = httpx.Request(
            "PATCH",
            URI,
            content=b'{"idShort":"a"}',
            headers={"Content-Type": "application/json"},
            extensions={"timeout": timeout},
        )

        decorated = transport.decorate(request)

        assert decorated.method == "PATCH"
        assert decorated.url == request.url
        assert decorated.content == b'{"idShort":"a"}'
        assert decorated.headers["Content-Type"] == "application/json"
        assert decorated.extensions["timeout"] == timeout

    def test_replaces_existing_authorization(self):
        """Test an existing Authorization header is replaced."""
        transport = TokenBasedTransport(_transport(Recorder()), lambda: "Bearer new")
        request = httpx.Request("GET", URI, headers={"Authorization": "Bearer old"})

        decorated = transport.decorate(request)

        assert decorated.headers.get_list("Authorization") == ["Bearer new"]


class TestSend:
    """Tests for the send paths."""

    def test_send_adds_header(self):
        """Test synchronous send delivers the decorated request."""
        recorder = Recorder()
        transport = TokenBasedTransport(_transport(recorder), bearer_token_supplier("abc"))

        response = transport.send(httpx.Request("GET", URI))

        assert response.status_code == 200
        assert recorder.requests[0].headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_send_async_adds_header(self):
        """Test asynchronous send delivers the decorated request."""
        recorder = Recorder()
        transport = TokenBasedTransport(_transport(recorder), bearer_token_supplier("abc"))

        response = await transport.send_async(httpx.Request("GET", URI))

        assert response.status_code == 200
        assert recorder.requests[0].headers["Authorization"] == "Bearer abc"
        await transport.aclose()

    def test_send_streaming_adds_header(self):
        """Test streaming send delivers the decorated request."""
        recorder = Recorder()
        transport = TokenBasedTransport(_transport(recorder), bearer_token_supplier("abc"))

        response = transport.send_streaming(httpx.Request("GET", URI))
        try:
            assert recorder.requests[0].headers["Authorization"] == "Bearer abc"
        finally:
            response.close()

    def test_supplier_called_per_request(self):
        """Test the supplier is evaluated once for every send."""
        calls = []

        def supplier():
            calls.append(1)
            return f"Bearer token-{len(calls)}"

        recorder = Recorder()
        transport = TokenBasedTransport(_transport(recorder), supplier)

        transport.send(httpx.Request("GET", URI))
        transport.send(httpx.Request("GET", URI))

        assert len(calls) == 2
        assert [r.headers["Authorization"] for r in recorder.requests] == [
            "Bearer token-1",
            "Bearer token-2",
        ]

    def test_post_body_is_sent(self):
        """Test the request body reaches the wrapped transport."""
        recorder = Recorder()
        transport = TokenBasedTransport(_transport(recorder), lambda: "Bearer abc")

        transport.send(httpx.Request("POST", URI, content=b"payload"))

        assert recorder.requests[0].content == b"payload"


class TestForwarding:
    """Tests for forwarding of configuration accessors."""

    def test_accessors_forwarded(self):
        """Test configuration is read from the wrapped transport."""
        inner = HttpxTransport(timeout=12.0, follow_redirects=False, verify=False)
        transport = TokenBasedTransport(inner, lambda: None)

        assert transport.timeout == inner.timeout
        assert transport.follow_redirects is False
        assert transport.verify is False
        assert transport.proxy is None
        assert transport.auth is None
        assert transport.cookies is inner.cookies
        assert transport.http_version == "HTTP/1.1"
        transport.close()

    def test_close_forwarded(self):
        """Test closing the decorator closes the wrapped client."""
        client = httpx.Client(transport=httpx.MockTransport(Recorder()))
        transport = TokenBasedTransport(HttpxTransport(client=client), lambda: None)

        transport.close()

        assert client.is_closed
