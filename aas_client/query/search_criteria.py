"""
Search criteria for list operations.

Each variant carries only the filters of its resource kind and renders
itself as a query string fragment (without leading '?'). Empty filters
render to the empty string.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

from basyx.aas import model
from basyx.aas.adapter._generic import ASSET_KIND
from basyx.aas.adapter.json import AASToJsonEncoder
from pydantic import BaseModel, Field

from aas_client.exceptions import InvalidPayloadError
from aas_client.utils.encoding import base64_encode, base64_url_encode
from aas_client.utils.references import reference_to_string


GLOBAL_ASSET_ID_KEY = "globalAssetId"


def _join(*fragments: str) -> str:
    return "&".join(fragment for fragment in fragments if fragment)


class SearchCriteria(BaseModel, ABC):
    """
    Base class of all search criteria.

    Only the variants below are instantiable; each renders its own filters.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @abstractmethod
    def to_query_string(self) -> str:
        """Render the filters as query fragment, "" if there are none."""


class DefaultSearchCriteria(SearchCriteria):
    """No filter at all."""

    def to_query_string(self) -> str:
        return ""


DEFAULT_SEARCH_CRITERIA = DefaultSearchCriteria()


class GlobalAssetIdentification(BaseModel):
    """Asset identified by its global asset id."""

    value: str

    model_config = {"frozen": True}

    def to_specific_asset_id(self) -> model.SpecificAssetId:
        return model.SpecificAssetId(name=GLOBAL_ASSET_ID_KEY, value=self.value)


class SpecificAssetIdentification(BaseModel):
    """Asset identified by a specific asset id (key/value pair)."""

    key: str
    value: str

    model_config = {"frozen": True}

    def to_specific_asset_id(self) -> model.SpecificAssetId:
        return model.SpecificAssetId(name=self.key, value=self.value)


AssetIdentification = GlobalAssetIdentification | SpecificAssetIdentification


def _to_specific_asset_id(asset_id: Any) -> model.SpecificAssetId:
    if isinstance(asset_id, model.SpecificAssetId):
        return asset_id
    try:
        return asset_id.to_specific_asset_id()
    except AttributeError as e:
        raise InvalidPayloadError(
            f"not an asset identification: {type(asset_id).__name__}"
        ) from e
    except ValueError as e:
        raise InvalidPayloadError(f"invalid asset identification {asset_id!r}: {e}") from e


def _to_json(value: Any) -> str:
    try:
        return json.dumps(value, cls=AASToJsonEncoder, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise InvalidPayloadError(f"failed to serialize {type(value).__name__} to JSON: {e}") from e


def _encode_reference(reference: model.Reference) -> str:
    return base64_encode(reference_to_string(reference))


def _encode_asset_ids_separately(asset_ids: list[Any]) -> str:
    return ",".join(
        base64_encode(_to_json(_to_specific_asset_id(asset_id))) for asset_id in asset_ids
    )


class AASBasicDiscoverySearchCriteria(SearchCriteria):
    """
    Filter for the basic discovery lookup by asset links.

    The asset ids are sent as one base64 encoded JSON array. Older discovery
    services expect every asset id encoded on its own and comma separated;
    set ``fallback`` to use that format.
    """

    asset_ids: list[Any] = Field(default_factory=list)
    fallback: bool = False

    def to_query_string(self) -> str:
        if not self.asset_ids:
            return ""
        if self.fallback:
            return "assetIds=" + _encode_asset_ids_separately(self.asset_ids)
        specific_asset_ids = [_to_specific_asset_id(asset_id) for asset_id in self.asset_ids]
        return "assetIds=" + base64_encode(_to_json(specific_asset_ids))


class ShellSearchCriteria(SearchCriteria):
    """Filter for listing shells of a repository."""

    asset_ids: list[Any] = Field(default_factory=list)
    id_short: str | None = None

    def to_query_string(self) -> str:
        asset_ids = "assetIds=" + _encode_asset_ids_separately(self.asset_ids) if self.asset_ids else ""
        id_short = f"idShort={self.id_short}" if self.id_short is not None else ""
        return _join(asset_ids, id_short)


class AASDescriptorSearchCriteria(SearchCriteria):
    """Filter for listing shell descriptors of a registry."""

    asset_kind: model.AssetKind | None = None
    asset_type: str | None = None

    def to_query_string(self) -> str:
        asset_kind = f"assetKind={ASSET_KIND[self.asset_kind]}" if self.asset_kind is not None else ""
        asset_type = (
            "assetType=" + base64_url_encode(self.asset_type) if self.asset_type is not None else ""
        )
        return _join(asset_kind, asset_type)


class SubmodelSearchCriteria(SearchCriteria):
    """Filter for listing submodels of a repository."""

    semantic_id: model.Reference | None = None
    id_short: str | None = None

    def to_query_string(self) -> str:
        semantic_id = (
            "semanticId=" + _encode_reference(self.semantic_id) if self.semantic_id is not None else ""
        )
        id_short = f"idShort={self.id_short}" if self.id_short is not None else ""
        return _join(semantic_id, id_short)


class ConceptDescriptionSearchCriteria(SearchCriteria):
    """Filter for listing concept descriptions."""

    id_short: str | None = None
    is_case_of: model.Reference | None = None
    data_specification: model.Reference | None = None

    def to_query_string(self) -> str:
        is_case_of = (
            "isCaseOf=" + _encode_reference(self.is_case_of) if self.is_case_of is not None else ""
        )
        id_short = f"idShort={self.id_short}" if self.id_short is not None else ""
        data_specification = (
            "dataSpecificationRef=" + _encode_reference(self.data_specification)
            if self.data_specification is not None
            else ""
        )
        return _join(is_case_of, id_short, data_specification)


class SerializationSearchCriteria(SearchCriteria):
    """Selection of shells and submodels to include in a serialization."""

    aas_ids: list[str] = Field(default_factory=list)
    submodel_ids: list[str] = Field(default_factory=list)

    def to_query_string(self) -> str:
        aas_ids = "aasIds=" + ",".join(base64_encode(i) for i in self.aas_ids) if self.aas_ids else ""
        submodel_ids = (
            "submodelIds=" + ",".join(base64_encode(i) for i in self.submodel_ids)
            if self.submodel_ids
            else ""
        )
        return _join(aas_ids, submodel_ids)
