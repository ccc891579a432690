"""
Submodel registry interface (``/submodel-descriptors``).

Descriptors are exchanged as plain JSON objects.
"""

from aas_client.clients.transport import HttpTransport
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface
from aas_client.query.builder import resolve
from aas_client.query.modifiers import PagingInfo
from aas_client.schemas.page import Page

API_PATH = "/submodel-descriptors"


class SubmodelRegistryInterface(BaseInterface):
    """
    Manage submodel descriptors.

    Args:
        endpoint: Registry URI, or the URI of a shell descriptor for the
            submodel descriptors nested below it
    """

    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, API_PATH), transport, auth_header_provider)

    def get_all(self) -> list[dict]:
        return self._get_all()

    def get_page(self, paging_info: PagingInfo) -> Page:
        return self._get_page(paging_info=paging_info)

    def post(self, descriptor: dict) -> dict:
        return self._post(None, descriptor)

    def get(self, submodel_id: str) -> dict:
        return self._get(self.id_path(submodel_id))

    def put(self, submodel_id: str, descriptor: dict) -> None:
        self._put(self.id_path(submodel_id), descriptor)

    def delete(self, submodel_id: str) -> None:
        self._delete(self.id_path(submodel_id))
