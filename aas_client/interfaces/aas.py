"""
Interface for a single Asset Administration Shell.
"""

from http import HTTPStatus

from basyx.aas import model

from aas_client.interfaces.base import BaseInterface
from aas_client.query.modifiers import Content, PagingInfo, QueryModifier
from aas_client.schemas.files import InMemoryFile, TypedInMemoryFile
from aas_client.schemas.page import Page

ASSET_INFORMATION_PATH = "/asset-information"
THUMBNAIL_PATH = ASSET_INFORMATION_PATH + "/thumbnail"
SUBMODEL_REFS_PATH = "/submodel-refs"


class AASInterface(BaseInterface):
    """
    Operations on one shell, addressed by its endpoint
    (e.g. ``.../shells/<base64url(id)>``).
    """

    def get(self, modifier: QueryModifier | None = None) -> model.AssetAdministrationShell:
        return self._get(None, Content.DEFAULT, modifier)

    def put(self, shell: model.AssetAdministrationShell) -> None:
        self._put(None, shell)

    def get_reference(self) -> dict:
        return self._get(None, Content.REFERENCE)

    def get_asset_information(self) -> dict:
        return self._get(ASSET_INFORMATION_PATH)

    def put_asset_information(self, asset_information: model.AssetInformation) -> None:
        self._put(ASSET_INFORMATION_PATH, asset_information)

    def get_thumbnail(self) -> InMemoryFile:
        return self._get_file(THUMBNAIL_PATH)

    def put_thumbnail(self, thumbnail: TypedInMemoryFile) -> None:
        self._put_file(THUMBNAIL_PATH, thumbnail)

    def delete_thumbnail(self) -> None:
        self._delete(THUMBNAIL_PATH, HTTPStatus.OK)

    def get_submodel_references(self, paging_info: PagingInfo = PagingInfo.ALL) -> Page:
        return self._get_page(SUBMODEL_REFS_PATH, paging_info=paging_info)

    def post_submodel_reference(self, reference: model.ModelReference) -> dict:
        return self._post(SUBMODEL_REFS_PATH, reference)

    def delete_submodel_reference(self, submodel_id: str) -> None:
        self._delete(SUBMODEL_REFS_PATH + self.id_path(submodel_id))
