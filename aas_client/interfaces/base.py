"""
Base class of all resource interfaces.

Combines the query builder, the request helpers and status validation into
generic get/list/page/post/put/patch/delete operations. Payloads are
(de)serialized with the BaSyx JSON adapter.
"""

import json
import logging
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

import httpx
from basyx.aas.adapter.json import (
    AASToJsonEncoder,
    StrictAASFromJsonDecoder,
    StrippedAASToJsonEncoder,
)
from pydantic import ValidationError

from aas_client.clients.transport import HttpTransport, new_default_transport
from aas_client.exceptions import InvalidPayloadError, UnsupportedStatusCodeError, status_code_error_for
from aas_client.query.builder import UriBuilder, apply, resolve, sanitize_endpoint
from aas_client.query.modifiers import Content, Level, PagingInfo, QueryModifier
from aas_client.query.search_criteria import DEFAULT_SEARCH_CRITERIA, SearchCriteria
from aas_client.schemas.files import InMemoryFile, TypedInMemoryFile
from aas_client.schemas.page import Page
from aas_client.utils import http_helper
from aas_client.utils.encoding import base64_url_encode
from aas_client.utils.file_parser import parse_file_body
from aas_client.utils.http_helper import HttpMethod

logger = logging.getLogger(__name__)

AuthHeaderProvider = Callable[[], str | None]

SUPPORTED_DEFAULT_HTTP_STATUS = [
    HTTPStatus.BAD_REQUEST,
    HTTPStatus.UNAUTHORIZED,
    HTTPStatus.FORBIDDEN,
    HTTPStatus.NOT_FOUND,
    HTTPStatus.INTERNAL_SERVER_ERROR,
]
SUPPORTED_POST_HTTP_STATUS = [HTTPStatus.METHOD_NOT_ALLOWED, HTTPStatus.CONFLICT]


def validate_status_code(method: HttpMethod, response: httpx.Response, expected: HTTPStatus) -> None:
    """
    Check a response against the expected status code.

    Raises:
        StatusCodeError: For status codes defined by the API contract
        UnsupportedStatusCodeError: For any other unexpected status code
    """
    if response is None:
        raise ValueError("response must be non-null")
    if response.status_code == expected:
        return

    supported = list(SUPPORTED_DEFAULT_HTTP_STATUS)
    if method == HttpMethod.POST:
        supported.extend(SUPPORTED_POST_HTTP_STATUS)

    logger.warning(
        "%s %s returned status %s, expected %s",
        method.value,
        response.request.url,
        response.status_code,
        expected.value,
    )
    if response.status_code not in supported:
        raise UnsupportedStatusCodeError(response)
    raise status_code_error_for(response)


def parse_body(response: httpx.Response) -> Any:
    """
    Decode a JSON response body.

    Objects carrying a modelType are turned into BaSyx model objects,
    everything else stays plain JSON.
    """
    try:
        return json.loads(response.text, cls=StrictAASFromJsonDecoder)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidPayloadError(f"failed to parse response body: {e}") from e


def parse_page(response: httpx.Response) -> Page:
    body = parse_body(response)
    if not isinstance(body, dict) or "result" not in body:
        raise InvalidPayloadError("paged response must be an object with a 'result' member")
    try:
        return Page.model_validate(body)
    except ValidationError as e:
        raise InvalidPayloadError(f"invalid paged response: {e}") from e


def serialize(entity: Any, content: Content = Content.DEFAULT, modifier: QueryModifier | None = None) -> str:
    """
    Serialize a payload to JSON.

    Metadata content and core level omit child elements, matching what
    the service expects for those modifiers.
    """
    stripped = content == Content.METADATA or (modifier is not None and modifier.level == Level.CORE)
    encoder = StrippedAASToJsonEncoder if stripped else AASToJsonEncoder
    try:
        return json.dumps(entity, cls=encoder)
    except (TypeError, ValueError) as e:
        raise InvalidPayloadError(f"Serialization failed: {e}") from e


class BaseInterface:
    """
    Generic operations against one resource endpoint.

    Args:
        endpoint: URI of the resource, e.g. "https://host/api/v3.0/shells"
        transport: Transport used for sending, a default one if None
        auth_header_provider: Called once per request for the value of the
            Authorization header; None means no header
    """

    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        self.endpoint = sanitize_endpoint(endpoint)
        self.transport = transport if transport is not None else new_default_transport()
        self.auth_header_provider = auth_header_provider

    def _auth_header(self) -> str | None:
        if self.auth_header_provider is None:
            return None
        return self.auth_header_provider()

    def _uri(
        self,
        path: str | None,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        paging_info: PagingInfo | None = None,
        search_criteria: SearchCriteria | None = None,
    ) -> str:
        return resolve(self.endpoint, apply(path, content, modifier, paging_info, search_criteria))

    def id_path(self, identifier: str) -> str:
        return "/" + base64_url_encode(identifier)

    def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug("%s %s", request.method, request.url)
        return http_helper.send(self.transport, request)

    def _get(
        self,
        path: str | None = None,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        search_criteria: SearchCriteria | None = None,
    ) -> Any:
        request = http_helper.create_get_request(
            self._uri(path, content, modifier, search_criteria=search_criteria),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.GET, response, HTTPStatus.OK)
        return parse_body(response)

    def _get_page(
        self,
        path: str | None = None,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        paging_info: PagingInfo | None = None,
        search_criteria: SearchCriteria = DEFAULT_SEARCH_CRITERIA,
    ) -> Page:
        request = http_helper.create_get_request(
            self._uri(path, content, modifier, paging_info, search_criteria),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.GET, response, HTTPStatus.OK)
        return parse_page(response)

    def _get_all(
        self,
        path: str | None = None,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        search_criteria: SearchCriteria = DEFAULT_SEARCH_CRITERIA,
    ) -> list[Any]:
        """Fetch a list without paging constraints."""
        return self._get_page(path, content, modifier, PagingInfo.ALL, search_criteria).result

    def _post(
        self,
        path: str | None,
        entity: Any,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        expected: HTTPStatus = HTTPStatus.CREATED,
    ) -> Any:
        request = http_helper.create_post_request(
            self._uri(path, content),
            serialize(entity, content, modifier),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.POST, response, expected)
        if not response.content:
            return None
        return parse_body(response)

    def _put(
        self,
        path: str | None,
        entity: Any,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
    ) -> None:
        request = http_helper.create_put_request(
            self._uri(path, content, modifier),
            serialize(entity, content, modifier),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.PUT, response, HTTPStatus.NO_CONTENT)

    def _patch(
        self,
        path: str | None,
        entity: Any,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
    ) -> None:
        request = http_helper.create_patch_request(
            self._uri(path, content, modifier),
            serialize(entity, content, modifier),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.PATCH, response, HTTPStatus.NO_CONTENT)

    def _delete(self, path: str | None, expected: HTTPStatus = HTTPStatus.NO_CONTENT) -> None:
        request = http_helper.create_delete_request(
            self._uri(path),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.DELETE, response, expected)

    def _get_file(self, path: str | None) -> InMemoryFile:
        request = http_helper.create_get_request(
            self._uri(path),
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.GET, response, HTTPStatus.OK)
        return parse_file_body(response)

    def _put_file(self, path: str | None, file: TypedInMemoryFile) -> None:
        request = http_helper.create_put_file_request(
            self._uri(path),
            file,
            self._auth_header(),
            self.transport.timeout,
        )
        response = self._send(request)
        validate_status_code(HttpMethod.PUT, response, HTTPStatus.NO_CONTENT)


class ServiceInterface(BaseInterface):
    """
    Interface addressed relative to the service root.

    URIs are built with UriBuilder: ``base_path`` and the paths below it are
    resolved against the service URI, content modifiers are appended as
    "$name" to paths ending in "/".
    """

    def __init__(
        self,
        service_uri: str,
        base_path: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(service_uri, transport, auth_header_provider)
        self.base_path = base_path.strip("/")
        self.uri_builder = UriBuilder(self.endpoint + "/")

    def _uri(
        self,
        path: str | None,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier | None = None,
        paging_info: PagingInfo | None = None,
        search_criteria: SearchCriteria | None = None,
    ) -> str:
        relative = self.base_path + (path or "")
        if content == Content.DEFAULT and modifier is None and paging_info is None and search_criteria is None:
            return self.uri_builder.get_uri(relative)
        return self.uri_builder.get_uri(relative, content, modifier, paging_info, search_criteria)
