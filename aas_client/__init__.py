"""
HTTP client for Asset Administration Shell (AAS) services.

Builds AAS API requests (content modifiers, level/extent, paging, search
criteria), sends them through a pluggable httpx based transport and maps
responses to BaSyx model objects.
"""

from aas_client.clients import HttpTransport, HttpxTransport, TokenBasedTransport, create_transport
from aas_client.config import ClientSettings, get_settings
from aas_client.exceptions import (
    ClientError,
    ConnectivityError,
    InvalidPayloadError,
    StatusCodeError,
    UnsupportedStatusCodeError,
)
from aas_client.interfaces import (
    AASBasicDiscoveryInterface,
    AASInterface,
    AASRegistryInterface,
    AASRepositoryInterface,
    ConceptDescriptionRepositoryInterface,
    DescriptionInterface,
    SerializationInterface,
    SubmodelInterface,
    SubmodelRegistryInterface,
    SubmodelRepositoryInterface,
)
from aas_client.query import Content, Extent, Level, PagingInfo, QueryModifier

__version__ = "1.0.0"

__all__ = [
    "AASBasicDiscoveryInterface",
    "AASInterface",
    "AASRegistryInterface",
    "AASRepositoryInterface",
    "ClientError",
    "ClientSettings",
    "ConceptDescriptionRepositoryInterface",
    "ConnectivityError",
    "Content",
    "DescriptionInterface",
    "Extent",
    "HttpTransport",
    "HttpxTransport",
    "InvalidPayloadError",
    "Level",
    "PagingInfo",
    "QueryModifier",
    "SerializationInterface",
    "StatusCodeError",
    "SubmodelInterface",
    "SubmodelRegistryInterface",
    "SubmodelRepositoryInterface",
    "TokenBasedTransport",
    "UnsupportedStatusCodeError",
    "create_transport",
    "get_settings",
]
