"""
Concept description repository interface (``concept-descriptions``).
"""

from basyx.aas import model

from aas_client.clients.transport import HttpTransport
from aas_client.interfaces.base import AuthHeaderProvider, ServiceInterface
from aas_client.query.modifiers import Content, PagingInfo, QueryModifier
from aas_client.query.search_criteria import ConceptDescriptionSearchCriteria
from aas_client.schemas.page import Page

BASE_PATH = "concept-descriptions"


class ConceptDescriptionRepositoryInterface(ServiceInterface):
    """
    Manage the concept descriptions of a service.

    Args:
        service_uri: Root URI of the service, e.g. "https://host/api/v3.0"
    """

    def __init__(
        self,
        service_uri: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(service_uri, BASE_PATH, transport, auth_header_provider)

    def get_all(
        self,
        search_criteria: ConceptDescriptionSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> list[model.ConceptDescription]:
        return self._get_all(
            None, Content.DEFAULT, modifier, search_criteria or ConceptDescriptionSearchCriteria()
        )

    def get_page(
        self,
        paging_info: PagingInfo,
        search_criteria: ConceptDescriptionSearchCriteria | None = None,
        modifier: QueryModifier | None = None,
    ) -> Page:
        return self._get_page(
            None,
            Content.DEFAULT,
            modifier,
            paging_info,
            search_criteria or ConceptDescriptionSearchCriteria(),
        )

    def post(self, concept_description: model.ConceptDescription) -> model.ConceptDescription:
        return self._post(None, concept_description)

    def get(self, cd_id: str) -> model.ConceptDescription:
        return self._get(self.id_path(cd_id))

    def put(self, concept_description: model.ConceptDescription, cd_id: str) -> None:
        self._put(self.id_path(cd_id), concept_description)

    def delete(self, cd_id: str) -> None:
        self._delete(self.id_path(cd_id))
