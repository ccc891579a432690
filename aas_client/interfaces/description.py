"""
Service description interface (``description``).
"""

from aas_client.clients.transport import HttpTransport
from aas_client.exceptions import InvalidPayloadError
from aas_client.interfaces.base import AuthHeaderProvider, ServiceInterface

BASE_PATH = "description"


class DescriptionInterface(ServiceInterface):
    def __init__(
        self,
        service_uri: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(service_uri, BASE_PATH, transport, auth_header_provider)

    def get(self) -> list[str]:
        """Service profiles supported by the service."""
        body = self._get()
        if not isinstance(body, dict) or not isinstance(body.get("profiles"), list):
            raise InvalidPayloadError("service description must contain a 'profiles' list")
        return body["profiles"]
