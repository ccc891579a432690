"""
Submodel repository interface (``/submodels``).
"""

from basyx.aas import model

from aas_client.clients.transport import HttpTransport
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface
from aas_client.interfaces.submodel import SubmodelInterface
from aas_client.query.builder import resolve
from aas_client.query.modifiers import Content, Level, PagingInfo, QueryModifier
from aas_client.query.search_criteria import SubmodelSearchCriteria
from aas_client.schemas.page import Page

API_PATH = "/submodels"


class SubmodelRepositoryInterface(BaseInterface):
    """List, create, read, replace, patch and delete submodels of a repository."""

    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, API_PATH), transport, auth_header_provider)

    def get_all(
        self,
        search_criteria: SubmodelSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> list[model.Submodel]:
        return self._get_all(None, Content.DEFAULT, modifier, search_criteria or SubmodelSearchCriteria())

    def get_page(
        self,
        paging_info: PagingInfo,
        search_criteria: SubmodelSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> Page:
        return self._get_page(
            None, Content.DEFAULT, modifier, paging_info, search_criteria or SubmodelSearchCriteria()
        )

    def get_all_metadata(self, search_criteria: SubmodelSearchCriteria | None = None) -> list[model.Submodel]:
        return self._get_all(None, Content.METADATA, None, search_criteria or SubmodelSearchCriteria())

    def post(self, submodel: model.Submodel) -> model.Submodel:
        return self._post(None, submodel)

    def get(self, submodel_id: str, modifier: QueryModifier | None = None) -> model.Submodel:
        return self._get(self.id_path(submodel_id), Content.DEFAULT, modifier)

    def put(self, submodel: model.Submodel, submodel_id: str) -> None:
        self._put(self.id_path(submodel_id), submodel, modifier=QueryModifier(level=Level.DEEP))

    def patch(self, submodel: model.Submodel, submodel_id: str) -> None:
        self._patch(self.id_path(submodel_id), submodel)

    def delete(self, submodel_id: str) -> None:
        self._delete(self.id_path(submodel_id))

    def get_submodel_interface(self, submodel_id: str) -> SubmodelInterface:
        """Interface for the operations on a single submodel."""
        return SubmodelInterface(
            resolve(self.endpoint, self.id_path(submodel_id)),
            self.transport,
            self.auth_header_provider,
        )
