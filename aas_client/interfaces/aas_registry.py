"""
Asset Administration Shell registry interface (``/shell-descriptors``).

Descriptors are exchanged as plain JSON objects.
"""

from aas_client.clients.transport import HttpTransport
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface
from aas_client.interfaces.submodel_registry import SubmodelRegistryInterface
from aas_client.query.builder import resolve
from aas_client.query.modifiers import Content, PagingInfo
from aas_client.query.search_criteria import AASDescriptorSearchCriteria
from aas_client.schemas.page import Page

API_PATH = "/shell-descriptors"


class AASRegistryInterface(BaseInterface):
    """List, create, read, replace and delete shell descriptors of a registry."""

    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, API_PATH), transport, auth_header_provider)

    def get_all(self, search_criteria: AASDescriptorSearchCriteria | None = None) -> list[dict]:
        return self._get_all(None, Content.DEFAULT, None, search_criteria or AASDescriptorSearchCriteria())

    def get_page(
        self,
        paging_info: PagingInfo,
        search_criteria: AASDescriptorSearchCriteria | None = None,
    ) -> Page:
        return self._get_page(
            None, Content.DEFAULT, None, paging_info, search_criteria or AASDescriptorSearchCriteria()
        )

    def post(self, descriptor: dict) -> dict:
        return self._post(None, descriptor)

    def get(self, aas_id: str) -> dict:
        return self._get(self.id_path(aas_id))

    def put(self, aas_id: str, descriptor: dict) -> None:
        self._put(self.id_path(aas_id), descriptor)

    def delete(self, aas_id: str) -> None:
        self._delete(self.id_path(aas_id))

    def get_submodel_registry_interface(self, aas_id: str) -> SubmodelRegistryInterface:
        """Interface for the submodel descriptors of one shell descriptor."""
        return SubmodelRegistryInterface(
            resolve(self.endpoint, self.id_path(aas_id)),
            self.transport,
            self.auth_header_provider,
        )
