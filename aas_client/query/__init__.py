"""
Query construction for AAS service requests.

- Modifiers: content, level/extent and paging parameters
- Search criteria: per-resource filters rendered as query fragments
- Builder: composes both into request paths and URIs
"""

from aas_client.query.builder import UriBuilder, apply, resolve
from aas_client.query.modifiers import Content, Extent, Level, PagingInfo, QueryModifier
from aas_client.query.search_criteria import (
    DEFAULT_SEARCH_CRITERIA,
    AASBasicDiscoverySearchCriteria,
    AASDescriptorSearchCriteria,
    ConceptDescriptionSearchCriteria,
    DefaultSearchCriteria,
    GlobalAssetIdentification,
    SearchCriteria,
    SerializationSearchCriteria,
    ShellSearchCriteria,
    SpecificAssetIdentification,
    SubmodelSearchCriteria,
)

__all__ = [
    "Content",
    "Extent",
    "Level",
    "PagingInfo",
    "QueryModifier",
    "SearchCriteria",
    "DefaultSearchCriteria",
    "DEFAULT_SEARCH_CRITERIA",
    "AASBasicDiscoverySearchCriteria",
    "AASDescriptorSearchCriteria",
    "ShellSearchCriteria",
    "SubmodelSearchCriteria",
    "ConceptDescriptionSearchCriteria",
    "SerializationSearchCriteria",
    "GlobalAssetIdentification",
    "SpecificAssetIdentification",
    "UriBuilder",
    "apply",
    "resolve",
]
