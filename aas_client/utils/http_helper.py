"""
Request construction and sending.

Builds httpx requests for each HTTP method with an optional Authorization
header, and normalizes transport failures into ConnectivityError.
"""

import logging
from enum import Enum

import httpx

from aas_client.clients.transport import HttpTransport
from aas_client.exceptions import ConnectivityError
from aas_client.schemas.files import TypedInMemoryFile

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"
CONTENT_TYPE = "Content-Type"
APPLICATION_JSON = "application/json"
MULTIPART_FORM_DATA = "multipart/form-data"

BOUNDARY = "----ClientBoundary7MA4YWxkTrZu0gW"
FILE_PARAMETER = "file"
FILENAME_PARAMETER = "fileName"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def _headers(auth_header: str | None, content_type: str | None = None) -> dict[str, str]:
    headers = {}
    if content_type is not None:
        headers[CONTENT_TYPE] = content_type
    if auth_header is not None:
        headers[AUTHORIZATION] = auth_header
    return headers


def _extensions(timeout: float | httpx.Timeout | None) -> dict | None:
    if timeout is None:
        return None
    return {"timeout": httpx.Timeout(timeout).as_dict()}


def _create_request(
    method: HttpMethod,
    uri: str,
    auth_header: str | None,
    timeout: float | httpx.Timeout | None,
    body: str | None = None,
) -> httpx.Request:
    if body is None:
        return httpx.Request(
            method.value,
            uri,
            headers=_headers(auth_header),
            extensions=_extensions(timeout),
        )
    return httpx.Request(
        method.value,
        uri,
        headers=_headers(auth_header, APPLICATION_JSON),
        content=body.encode("utf-8"),
        extensions=_extensions(timeout),
    )


def create_get_request(
    uri: str,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    return _create_request(HttpMethod.GET, uri, auth_header, timeout)


def create_post_request(
    uri: str,
    body: str,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    return _create_request(HttpMethod.POST, uri, auth_header, timeout, body)


def create_put_request(
    uri: str,
    body: str,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    return _create_request(HttpMethod.PUT, uri, auth_header, timeout, body)


def create_patch_request(
    uri: str,
    body: str,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    return _create_request(HttpMethod.PATCH, uri, auth_header, timeout, body)


def create_delete_request(
    uri: str,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    return _create_request(HttpMethod.DELETE, uri, auth_header, timeout)


def create_put_file_request(
    uri: str,
    file: TypedInMemoryFile,
    auth_header: str | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.Request:
    """
    Create a multipart PUT request uploading a file.

    The body contains a text part "fileName" with the file's path and a
    binary part "file" with the content, separated by a fixed boundary.
    """
    return httpx.Request(
        HttpMethod.PUT.value,
        uri,
        headers=_headers(auth_header, f"{MULTIPART_FORM_DATA}; boundary={BOUNDARY}"),
        data={FILENAME_PARAMETER: file.path},
        files={
            FILE_PARAMETER: (file.path, file.content, f"{file.content_type}; charset=UTF-8"),
        },
        extensions=_extensions(timeout),
    )


def send(transport: HttpTransport, request: httpx.Request) -> httpx.Response:
    """
    Send a request and read the response.

    Raises:
        ConnectivityError: If the transport fails (network, timeout, protocol)
    """
    try:
        return transport.send(request)
    except httpx.TransportError as e:
        logger.debug("Sending %s %s failed: %s", request.method, request.url, e)
        raise ConnectivityError(cause=e) from e


async def send_async(transport: HttpTransport, request: httpx.Request) -> httpx.Response:
    """
    Send a request asynchronously.

    Cancellation of the awaiting task is not intercepted.

    Raises:
        ConnectivityError: If the transport fails (network, timeout, protocol)
    """
    try:
        return await transport.send_async(request)
    except httpx.TransportError as e:
        logger.debug("Sending %s %s failed: %s", request.method, request.url, e)
        raise ConnectivityError(cause=e) from e
