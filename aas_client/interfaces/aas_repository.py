"""
Asset Administration Shell repository interface (``/shells``).
"""

from basyx.aas import model

from aas_client.clients.transport import HttpTransport
from aas_client.interfaces.aas import AASInterface
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface
from aas_client.query.builder import resolve
from aas_client.query.modifiers import Content, PagingInfo, QueryModifier
from aas_client.query.search_criteria import ShellSearchCriteria
from aas_client.schemas.page import Page

API_PATH = "/shells"


class AASRepositoryInterface(BaseInterface):
    """List, create, read, replace and delete shells of a repository."""

    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, API_PATH), transport, auth_header_provider)

    def get_all(
        self,
        search_criteria: ShellSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> list[model.AssetAdministrationShell]:
        return self._get_all(
            None, Content.DEFAULT, modifier, search_criteria or ShellSearchCriteria()
        )

    def get_page(
        self,
        paging_info: PagingInfo,
        search_criteria: ShellSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> Page:
        return self._get_page(
            None, Content.DEFAULT, modifier, paging_info, search_criteria or ShellSearchCriteria()
        )

    def get_all_references(self, search_criteria: ShellSearchCriteria | None = None) -> list[dict]:
        """References of all shells, as plain JSON objects."""
        return self._get_all(None, Content.REFERENCE, None, search_criteria or ShellSearchCriteria())

    def post(self, shell: model.AssetAdministrationShell) -> model.AssetAdministrationShell:
        return self._post(None, shell)

    def get(self, aas_id: str, modifier: QueryModifier | None = None) -> model.AssetAdministrationShell:
        return self._get(self.id_path(aas_id), Content.DEFAULT, modifier)

    def put(self, shell: model.AssetAdministrationShell, aas_id: str) -> None:
        self._put(self.id_path(aas_id), shell)

    def delete(self, aas_id: str) -> None:
        self._delete(self.id_path(aas_id))

    def get_aas_interface(self, aas_id: str) -> AASInterface:
        """Interface for the operations on a single shell."""
        return AASInterface(
            resolve(self.endpoint, self.id_path(aas_id)),
            self.transport,
            self.auth_header_provider,
        )
