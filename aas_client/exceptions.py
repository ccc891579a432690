"""
Exception hierarchy for the AAS client.

- ConnectivityError: the request never produced a response
- InvalidPayloadError: a payload or query value could not be (de)serialized
- StatusCodeError: the service answered with an unexpected status code
"""

from http import HTTPStatus

import httpx


class ClientError(Exception):
    """Base class for all errors raised by the client."""


class ConnectivityError(ClientError):
    """Raised when the transport fails to deliver a request."""

    def __init__(self, message: str = "Connection to the service failed", cause: BaseException | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class InvalidPayloadError(ClientError, ValueError):
    """Raised when a value could not be serialized or a response could not be parsed."""


class UnsupportedStatusCodeError(ClientError):
    """Raised for status codes the service contract does not define."""

    def __init__(self, response: httpx.Response):
        body = _safe_text(response)
        super().__init__(
            f"Received HTTP status code {response.status_code} "
            f"(uri: {response.request.url}, response body: {body or 'not available'})"
        )
        self.response = response
        self.status_code = response.status_code


class StatusCodeError(ClientError):
    """
    Raised when the service returns a documented error status.

    Carries the request that was sent and the response that was received.
    """

    status: HTTPStatus | None = None

    def __init__(self, response: httpx.Response):
        request = response.request
        super().__init__(
            f"httpMethod='{request.method}',\n"
            f"requestUri='{request.url}',\n"
            f"statusCode='{response.status_code}',\n"
            f"responseBody=\n{_safe_text(response)}"
        )
        self.request = request
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def service_uri(self) -> str:
        return str(self.request.url)


class BadRequestError(StatusCodeError):
    status = HTTPStatus.BAD_REQUEST


class UnauthorizedError(StatusCodeError):
    status = HTTPStatus.UNAUTHORIZED


class ForbiddenError(StatusCodeError):
    status = HTTPStatus.FORBIDDEN


class NotFoundError(StatusCodeError):
    status = HTTPStatus.NOT_FOUND


class MethodNotAllowedError(StatusCodeError):
    status = HTTPStatus.METHOD_NOT_ALLOWED


class ConflictError(StatusCodeError):
    status = HTTPStatus.CONFLICT


class InternalServerError(StatusCodeError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR


STATUS_CODE_ERRORS: dict[HTTPStatus, type[StatusCodeError]] = {
    error.status: error
    for error in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        MethodNotAllowedError,
        ConflictError,
        InternalServerError,
    )
}


def status_code_error_for(response: httpx.Response) -> ClientError:
    """
    Create the exception matching a response's status code.

    Returns:
        A StatusCodeError subclass, or UnsupportedStatusCodeError if the
        status code has no dedicated exception.
    """
    try:
        status = HTTPStatus(response.status_code)
    except ValueError:
        return UnsupportedStatusCodeError(response)
    error_type = STATUS_CODE_ERRORS.get(status)
    if error_type is None:
        return UnsupportedStatusCodeError(response)
    return error_type(response)


def _safe_text(response: httpx.Response) -> str:
    try:
        return response.text
    except httpx.ResponseNotRead:
        return ""
