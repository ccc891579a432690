"""
Basic discovery interface (``/lookup/shells``).

Links assets to shells: lookup of shell ids by asset ids and management of
the asset links of a shell.
"""

from http import HTTPStatus
from typing import Any

from aas_client.clients.transport import HttpTransport
from aas_client.exceptions import InvalidPayloadError
from aas_client.interfaces.base import AuthHeaderProvider, BaseInterface
from aas_client.query.builder import resolve
from aas_client.query.modifiers import Content, PagingInfo
from aas_client.query.search_criteria import (
    AASBasicDiscoverySearchCriteria,
    AssetIdentification,
    SpecificAssetIdentification,
)
from aas_client.schemas.page import Page

LOOKUP_PATH = "/lookup/shells"


def _to_asset_identification(value: Any) -> SpecificAssetIdentification:
    if not isinstance(value, dict) or "name" not in value or "value" not in value:
        raise InvalidPayloadError(f"not a specific asset id: {value!r}")
    return SpecificAssetIdentification(key=value["name"], value=value["value"])


class AASBasicDiscoveryInterface(BaseInterface):
    def __init__(
        self,
        endpoint: str,
        transport: HttpTransport | None = None,
        auth_header_provider: AuthHeaderProvider | None = None,
    ):
        super().__init__(resolve(endpoint, LOOKUP_PATH), transport, auth_header_provider)

    def lookup_by_asset_link(
        self,
        asset_links: list[AssetIdentification],
        paging_info: PagingInfo = PagingInfo.ALL,
        fallback: bool = False,
    ) -> Page:
        """
        Find the ids of all shells linked to the given assets.

        Args:
            asset_links: Asset ids the shells must be linked to
            paging_info: Limit and cursor
            fallback: Encode every asset id on its own, for services that
                do not accept the JSON array format

        Returns:
            Page of shell ids
        """
        search_criteria = AASBasicDiscoverySearchCriteria(asset_ids=asset_links, fallback=fallback)
        return self._get_page(None, Content.DEFAULT, None, paging_info, search_criteria)

    def lookup_by_aas_id(self, aas_id: str) -> list[SpecificAssetIdentification]:
        """Asset links of a shell."""
        body = self._get(self.id_path(aas_id))
        if not isinstance(body, list):
            raise InvalidPayloadError("asset link lookup must return a list")
        return [_to_asset_identification(value) for value in body]

    def create_asset_links(
        self,
        asset_links: list[AssetIdentification],
        aas_id: str,
    ) -> list[SpecificAssetIdentification]:
        """Link assets to a shell, replacing its current links."""
        specific_asset_ids = [asset_link.to_specific_asset_id() for asset_link in asset_links]
        body = self._post(self.id_path(aas_id), specific_asset_ids, expected=HTTPStatus.OK)
        if body is None:
            return []
        return [_to_asset_identification(value) for value in body]

    def delete_asset_links(self, aas_id: str) -> None:
        self._delete(self.id_path(aas_id))
